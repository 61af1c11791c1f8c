"""Entry point for ``python -m pronouner <command>``.

Commands:
    compile  - compile dialog text against the cast and verb dictionary
    check    - report every macro problem in a dialog document
    verbs    - print conjugation tables from the verb dictionary
    cast     - list characters with their pronouns
"""
from pronouner.cli import main

if __name__ == "__main__":
    main()
