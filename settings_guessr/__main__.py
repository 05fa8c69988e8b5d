from settings_guessr.cli import main

main(prog_name="settings-guessr")
