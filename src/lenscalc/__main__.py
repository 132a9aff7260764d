from lenscalc.main import main

raise SystemExit(main())
