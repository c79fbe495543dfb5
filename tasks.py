#!/usr/bin/env python
# -*- coding: utf-8 -*-
# mypy: ignore-errors
"""
Development scripts.

You need ``invoke`` installed to run them.
"""
import os
import re

import invoke


ROOT = os.path.dirname(os.path.abspath(__file__))
PACKAGE = "src/gql_sdl"
DEFAULT_TARGETS = f"{PACKAGE} tests"

VALID_VERSION_RE = re.compile(r"^\d+\.\d+\.\d+(?:\.(dev|a|b|rc)\d+)?$")


def _join(*cmd):
    return " ".join(c for c in cmd if c)


@invoke.task()
def clean(ctx, full=False):
    """
    Remove artifacts and local caches.
    """
    with ctx.cd(ROOT):
        ctx.run('find src tests -type f -name "*.pyc" -delete')
        ctx.run('find src tests -type d -name "__pycache__" -delete')
        ctx.run('find src tests -type f -name "*.c" -delete')
        ctx.run('find src tests -type f -name "*.so" -delete')
        ctx.run('find . src tests -type f -path "*.egg-info*" -delete')

        if full:
            ctx.run(
                _join(
                    "rm",
                    "-rf ",
                    ".pytest_cache",
                    ".mypy_cache",
                    "junit*.xml",
                    "htmlcov*",
                    "coverage*.xml",
                    ".coverage*",
                    "dist",
                    "build",
                ),
            )


@invoke.task(iterable=["files", "ignore"])
def test(
    ctx,
    coverage=False,
    bail=True,
    verbose=False,
    grep=None,
    files=None,
    junit=False,
    ignore=None,
):
    """
    Run test suite (using: py.test).

    You should be able to run pytest directly but this provides some useful
    shortcuts and defaults.
    """
    ignore = ignore or []
    files = f"{PACKAGE} tests" if not files else " ".join(files)

    with ctx.cd(ROOT):
        ctx.run(
            _join(
                "py.test",
                "-c setup.cfg",
                "--exitfirst" if bail else None,
                (
                    f"--cov {PACKAGE} --cov-config setup.cfg --no-cov-on-fail"
                    if coverage
                    else None
                ),
                "--junit-xml junit.xml" if junit else None,
                "-vvl --full-trace" if verbose else "-q",
                "-rf",
                f"-k {grep}" if grep else None,
                "--benchmark-skip",
                " ".join(f"--ignore {i}" for i in ignore) if ignore else None,
                files,
            ),
            echo=True,
            pty=True,
        )


@invoke.task(aliases=["bench"])
def benchmark(ctx):
    """
    Run benchmarks.
    """
    with ctx.cd(ROOT):
        ctx.run(
            _join(
                "py.test",
                "--benchmark-only",
                "--benchmark-group-by=fullname",
                "tests/benchmarks",
            ),
            echo=True,
            pty=True,
        )


@invoke.task(iterable=["files"])
def flake8(ctx, files=None):
    files = f"{DEFAULT_TARGETS} setup.py" if not files else " ".join(files)
    ctx.run(_join("flake8", files), echo=True)


@invoke.task(aliases=["typecheck"], iterable=["files"])
def mypy(ctx, files=None):
    files = PACKAGE if not files else " ".join(files)
    ctx.run(_join("mypy", files), echo=True)


@invoke.task(aliases=["format"], iterable=["files"])
def fmt(ctx, files=None):
    """
    Run formatters.
    """
    targets = (
        f"{DEFAULT_TARGETS} setup.py tasks.py" if not files else " ".join(files)
    )
    with ctx.cd(ROOT):
        ctx.run(_join("isort", targets), echo=True)
        ctx.run(_join("black", "-l 80", targets), echo=True)


@invoke.task(pre=[flake8, mypy, test])
def check(ctx):
    """
    Run all checks (lint, typecheck and tests).
    """


@invoke.task
def build(ctx, cythonize_module=False):
    """
    Build source distribution and wheel.
    """
    with ctx.cd(ROOT):
        ctx.run("rm -rf dist", echo=True)
        ctx.run(
            _join(
                "GQL_SDL_USE_CYTHON=1" if cythonize_module else None,
                "python",
                "setup.py",
                "sdist",
                "bdist_wheel",
            ),
            echo=True,
        )


@invoke.task
def update_version(ctx, version, force=False, push=False):
    """
    Update version and create relevant git tag.
    """
    version_file = os.path.join(PACKAGE, "version.py")

    with ctx.cd(ROOT):
        if not VALID_VERSION_RE.match(version):
            raise invoke.exceptions.Exit(
                f"Invalid version format, must match /{VALID_VERSION_RE.pattern}/.",
            )

        pkg = {}

        with open(version_file) as f:
            exec(f.read(), {}, pkg)

        local_version = pkg["__version__"]

        if (not force) and local_version >= version:
            raise invoke.exceptions.Exit(
                f"Must increment the version (current {local_version}).",
            )

        with open(version_file) as f:
            new_file = f.read().replace(local_version, version)

        with open(version_file, "w") as f:
            f.write(new_file)

        ctx.run(f"git add {version_file}")
        ctx.run(f"git commit -m v{version}")
        ctx.run(f"git tag v{version}")

        if push:
            ctx.run("git push && git push --tags")
