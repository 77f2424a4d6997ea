from studio_backend.server import main

raise SystemExit(main())
