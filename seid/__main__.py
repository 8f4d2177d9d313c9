from seid.cli import main

raise SystemExit(main())
