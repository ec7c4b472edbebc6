from bookshelf.cli.main import main

raise SystemExit(main())
