from .cli import main

exit(main())
