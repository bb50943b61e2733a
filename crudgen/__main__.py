from crudgen.commands import main

main()
