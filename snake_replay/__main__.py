from snake_replay.cli import main

raise SystemExit(main())
