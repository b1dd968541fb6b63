"""terminal_cv package: a simulated terminal for browsing a CV with shell-like commands.

Submodules are imported directly; nothing is re-exported here.
"""

__all__: list[str] = []
