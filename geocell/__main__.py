from geocell.main import main

raise SystemExit(main())
