from bikemonkey.cli import main

main(prog_name="bikemonkey")
