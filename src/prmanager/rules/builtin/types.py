"""Built-in file type rules, in precedence order (first match wins)."""

from prmanager.rules.models import FileType, TypeRule

TEST_FILES = TypeRule(
    id="test",
    file_type=FileType.TEST,
    description="Test sources and fixtures.",
    contains=["test", "spec", "__tests__"],
    suffixes=[".test.ts", ".test.js", ".spec.ts", ".spec.js"],
)

DEPENDENCY_MANIFESTS = TypeRule(
    id="deps",
    file_type=FileType.DEPS,
    description="Package manifests and lock files.",
    filenames=[
        "package.json",
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
        "requirements.txt",
        "poetry.lock",
        "pipfile.lock",
        "go.mod",
        "go.sum",
        "pom.xml",
        "build.gradle",
    ],
)

CONFIG_FILES = TypeRule(
    id="config",
    file_type=FileType.CONFIG,
    description="CI, container, deployment and tooling configuration.",
    prefixes=[".github/", ".circleci/", "helm/", "k8s/", "terraform/"],
    contains=["dockerfile", "docker-compose", "tsconfig", "eslint", "prettier"],
    suffixes=[".gitlab-ci.yml"],
)

DATABASE_FILES = TypeRule(
    id="db",
    file_type=FileType.DB,
    description="Migrations, schemas and SQL.",
    contains=["migration", "migrations", "schema"],
    suffixes=[".sql"],
)

DOCUMENTATION = TypeRule(
    id="docs",
    file_type=FileType.DOCS,
    description="Markdown and the docs/ tree.",
    prefixes=["docs/"],
    suffixes=[".md"],
)

ALL_TYPE_RULES = [
    TEST_FILES,
    DEPENDENCY_MANIFESTS,
    CONFIG_FILES,
    DATABASE_FILES,
    DOCUMENTATION,
]
