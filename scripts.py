import subprocess
import sys

SOURCES = ["src", "tests"]


def _run(*command):
    subprocess.run(list(command), check=True)


def run_tests():
    _run("pytest")


def run_doctests():
    # Examples embedded in the arenatree docstrings
    _run("pytest", "--doctest-modules", "src/arenatree")


def run_lint():
    _run("flake8", "--max-line-length", "120", *SOURCES)


def run_typecheck():
    _run("mypy", "src")


def run_format():
    _run("black", *SOURCES)


def run_coverage():
    _run("pytest", "--cov=arenatree", "--cov-branch", "tests/", "--cov-report=term-missing", "--cov-report=xml")


def run_checks():
    run_lint()
    run_typecheck()
    run_tests()
    run_doctests()


if __name__ == "__main__":
    globals()[sys.argv[1]]()
