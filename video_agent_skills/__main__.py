import sys

from video_agent_skills.cli import main

sys.exit(main())
