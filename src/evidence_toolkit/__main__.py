from evidence_toolkit.cli import main

raise SystemExit(main())
