"""Shared test fixtures: sample diffs in unified, git and classic form."""

from __future__ import annotations

import textwrap

import pytest


@pytest.fixture
def two_file_diff() -> str:
    """Two file sections without any git preamble."""
    return textwrap.dedent("""\
        --- a/app.py
        +++ b/app.py
        @@ -1,3 +1,3 @@
         import os
        -DEBUG = True
        +DEBUG = False
         print(os.name)
        --- a/util.py
        +++ b/util.py
        @@ -10,2 +10,3 @@
         def main():
        +    log("starting")
             run()
    """)


@pytest.fixture
def git_diff() -> str:
    """A git diff with its 'diff --git' / 'index' preamble."""
    return textwrap.dedent("""\
        diff --git a/app.py b/app.py
        index 1234567..abcdef0 100644
        --- a/app.py
        +++ b/app.py
        @@ -1,2 +1,2 @@
        -DEBUG = True
        +DEBUG = False
    """)


@pytest.fixture
def normal_diff() -> str:
    """Classic (non-unified) diff output with digit range lines."""
    return textwrap.dedent("""\
        2c2
        < DEBUG = True
        ---
        > DEBUG = False
        5a6
        > log("starting")
    """)


@pytest.fixture
def single_hunk() -> str:
    """One hunk whose only changed line is '+foo'."""
    return textwrap.dedent("""\
        --- a/f.txt
        +++ b/f.txt
        @@ -1 +1 @@
        +foo
    """)


@pytest.fixture
def bar_then_foo_hunk() -> str:
    """One hunk with '-bar' before '+foo'."""
    return textwrap.dedent("""\
        --- a/f.txt
        +++ b/f.txt
        @@ -1 +1 @@
        -bar
        +foo
    """)


@pytest.fixture
def no_newline_diff() -> str:
    """A hunk ending with the 'No newline at end of file' marker."""
    return textwrap.dedent("""\
        --- a/data.txt
        +++ b/data.txt
        @@ -1 +1 @@
        -old
        +final line without newline
        \\ No newline at end of file
    """)
