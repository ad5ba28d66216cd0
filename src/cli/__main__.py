from .shades import main

raise SystemExit(main())
