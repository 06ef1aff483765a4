from goldenspiral.main import main

raise SystemExit(main())
