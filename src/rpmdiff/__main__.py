from .cli import rpmdiff_main

rpmdiff_main()
