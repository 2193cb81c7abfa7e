from advent_of_code.runner import main

raise SystemExit(main())
