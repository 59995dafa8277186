from create_remix_plugin.cli import main

main()
