from zulu.cli import main

main(prog_name="zulu")
