from tuilade.run import main

raise SystemExit(main())
