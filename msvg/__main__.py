from msvg.app import main

raise SystemExit(main())
