from dora_metrics.app import main

raise SystemExit(main())
