from hufftree.cli import main

raise SystemExit(main())
