from chessrules.app import main

raise SystemExit(main())
