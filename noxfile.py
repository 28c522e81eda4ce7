"""Nox file."""

import nox


@nox.session()
def tests(session: nox.Session) -> None:
    """Run the test suite on the default architecture."""
    session.install(".[test]")
    session.run("pytest", *session.posargs)


@nox.session()
def tests_cpu(session: nox.Session) -> None:
    """Run the test suite, forcing CPU."""
    session.install(".[test]")
    session.run("pytest", "--cpu", *session.posargs)
