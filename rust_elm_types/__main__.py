from rust_elm_types.cli import main

main()
