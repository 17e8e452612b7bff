"""Shared test fixtures — sample diffs, file changes, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest

from prmanager.heuristics.models import FileChange, PRMeta
from prmanager.rules.models import FileType


def make_file(
    path: str,
    type: FileType = FileType.CODE,
    additions: int = 1,
    deletions: int = 0,
    flags=None,
    patch: str = "",
) -> FileChange:
    """Build a FileChange without going through the rule set."""
    return FileChange(
        path=path,
        type=type,
        language="text",
        additions=additions,
        deletions=deletions,
        flags=list(flags or []),
        patch_snippet=patch,
    )


@pytest.fixture
def pr_with_body() -> PRMeta:
    return PRMeta(
        title="Add login throttling",
        number=42,
        author="octocat",
        created_at="2024-01-01T00:00:00Z",
        body="Throttles repeated login attempts per account and IP address.",
    )


@pytest.fixture
def sample_diff_auth() -> str:
    """One auth file: five additions (one exported function), two deletions."""
    return textwrap.dedent("""\
        diff --git a/src/auth/login.ts b/src/auth/login.ts
        index 1234567..abcdef0 100644
        --- a/src/auth/login.ts
        +++ b/src/auth/login.ts
        @@ -1,4 +1,7 @@
         import { db } from "../db";
        -const limit = 3;
        -const window = 60;
        +const limit = 5;
        +const window = 120;
        +export function login(user: string) {
        +  return db.check(user, limit, window);
        +}
    """)


@pytest.fixture
def sample_diff_two_files() -> str:
    return textwrap.dedent("""\
        diff --git a/README.md b/README.md
        index 1111111..2222222 100644
        --- a/README.md
        +++ b/README.md
        @@ -1,2 +1,2 @@
         # Project
        -Old intro
        +New intro
        diff --git a/.eslintrc.json b/.eslintrc.json
        index 3333333..4444444 100644
        --- a/.eslintrc.json
        +++ b/.eslintrc.json
        @@ -1,3 +1,3 @@
         {
        -  "extends": "eslint:recommended"
        +  "extends": ["eslint:recommended", "prettier"]
         }
    """)


@pytest.fixture
def sample_diff_lodash_bump() -> str:
    return textwrap.dedent("""\
        diff --git a/package.json b/package.json
        index 5555555..6666666 100644
        --- a/package.json
        +++ b/package.json
        @@ -10,3 +10,3 @@
           "dependencies": {
        -    "lodash": "^3.10.1"
        +    "lodash": "^4.0.0"
           }
    """)


@pytest.fixture
def sample_diff_migration() -> str:
    return textwrap.dedent("""\
        diff --git a/migrations/003_add_users.sql b/migrations/003_add_users.sql
        new file mode 100644
        index 0000000..7777777
        --- /dev/null
        +++ b/migrations/003_add_users.sql
        @@ -0,0 +1,3 @@
        +CREATE TABLE users (
        +  id SERIAL PRIMARY KEY
        +);
    """)


@pytest.fixture
def sample_diff_binary() -> str:
    return textwrap.dedent("""\
        diff --git a/assets/logo.png b/assets/logo.png
        new file mode 100644
        index 0000000..8888888
        Binary files /dev/null and b/assets/logo.png differ
    """)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path


@pytest.fixture
def make_change():
    """Factory fixture for hand-built FileChange records."""
    return make_file
