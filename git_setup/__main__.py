from git_setup.cli import main

raise SystemExit(main())
