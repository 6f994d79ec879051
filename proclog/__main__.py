from proclog.run_logger import main

raise SystemExit(main())
