"""Allow ``python -m jsoneditor``."""

from jsoneditor.tui.app import main

main()
