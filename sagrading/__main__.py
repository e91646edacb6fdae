"""Allow ``python -m sagrading``."""

from sagrading.tui.app import main

main()
