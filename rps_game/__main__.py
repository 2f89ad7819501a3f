from rps_game.cli import main

raise SystemExit(main())
