"""``python -m perch`` — same as the ``perch`` command."""

from perch.cli import main

main()
