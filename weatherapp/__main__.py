from weatherapp.app.main import main

raise SystemExit(main())
