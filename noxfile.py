"""Nox sessions."""

import os
import shutil
import sys
from pathlib import Path
from textwrap import dedent

try:
    import nox
    from nox import Session
    from nox import session
except ImportError:
    message = f"""\
    Nox failed to import.

    Please install it using the following command:

    {sys.executable} -m pip install nox[uv]"""
    raise SystemExit(dedent(message)) from None

package = "image_sizes"
python_versions = ["3.13", "3.12", "3.11"]
nox.needs_version = ">=2025.2.9"
nox.options.default_venv_backend = "uv"
nox.options.sessions = ("lint", "mypy", "tests", "typeguard", "xdoctest")


def session_install_uv(session: Session, install_dev: bool = False, install_docs: bool = False) -> None:
    """Install root project into the session's virtual environment using uv."""
    env = {"UV_PROJECT_ENVIRONMENT": session.virtualenv.location}

    args = ["uv", "sync", "--frozen"]
    if not install_dev:
        args.append("--no-dev")
    if install_docs:
        args.extend(["--group", "docs"])

    session.run_install(*args, silent=True, env=env)


def session_install_uv_package(session: Session, packages: list[str]) -> None:
    """Install packages into the session's virtual environment using uv lockfile."""
    env = {"UV_PROJECT_ENVIRONMENT": session.virtualenv.location}

    # Pin extra packages to the versions in the lockfile
    requirements_tmp = str(Path(session.create_tmp()) / "requirements.txt")
    export_args = ["uv", "export", "--only-dev", "--no-hashes", "-o", requirements_tmp]
    session.run_install(*export_args, silent=True, env=env)

    session.install(*packages, "--constraint", requirements_tmp)


@session(python=python_versions[0])
def lint(session: Session) -> None:
    """Lint and check formatting using ruff."""
    session_install_uv_package(session, ["ruff"])
    session.run("ruff", "check", "src", "tests", "noxfile.py")
    session.run("ruff", "format", "--check", "src", "tests", "noxfile.py")


@session(python=python_versions)
def mypy(session: Session) -> None:
    """Type-check using mypy."""
    args = session.posargs or ["src", "tests"]
    session_install_uv(session)
    session_install_uv_package(session, ["mypy", "pytest", "types-pyyaml"])
    session.run("mypy", *args)


@session(python=python_versions)
def tests(session: Session) -> None:
    """Run the test suite."""
    session_install_uv(session)
    session_install_uv_package(session, ["coverage[toml]", "pytest", "pygments"])

    try:
        session.run("coverage", "run", "--parallel", "-m", "pytest", *session.posargs)
    finally:
        if session.interactive:
            session.notify("coverage", posargs=[])


@session(python=python_versions[0])
def coverage(session: Session) -> None:
    """Produce the coverage report."""
    args = session.posargs or ["report"]

    session_install_uv_package(session, ["coverage[toml]"])

    if not session.posargs and any(Path().glob(".coverage.*")):
        session.run("coverage", "combine")

    session.run("coverage", *args)


@session(python=python_versions[0])
def typeguard(session: Session) -> None:
    """Runtime type checking using Typeguard."""
    session_install_uv(session)
    session_install_uv_package(session, ["pytest", "typeguard", "pygments"])
    session.run("pytest", f"--typeguard-packages={package}", *session.posargs)


@session(python=python_versions)
def xdoctest(session: Session) -> None:
    """Run examples with xdoctest."""
    if session.posargs:
        args = [package, *session.posargs]
    else:
        args = [f"--modname={package}", "--command=all"]
        if "FORCE_COLOR" in os.environ:
            args.append("--colored=1")

    session_install_uv(session)
    session_install_uv_package(session, ["xdoctest[colors]"])
    session.run("python", "-m", "xdoctest", *args)


@session(name="docs-build", python=python_versions[0])
def docs_build(session: Session) -> None:
    """Build the documentation."""
    args = session.posargs or ["docs", "docs/_build"]
    if not session.posargs and "FORCE_COLOR" in os.environ:
        args.insert(0, "--color")

    session_install_uv(session, install_docs=True)

    build_dir = Path("docs", "_build")
    if build_dir.exists():
        shutil.rmtree(build_dir)

    session.run("sphinx-build", *args)
