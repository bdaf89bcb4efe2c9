from sidebar_config.cli import main

raise SystemExit(main())
