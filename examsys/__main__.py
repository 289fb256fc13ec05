from examsys.main import main

raise SystemExit(main())
