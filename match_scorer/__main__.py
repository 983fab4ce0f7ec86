from match_scorer.main import main

raise SystemExit(main())
