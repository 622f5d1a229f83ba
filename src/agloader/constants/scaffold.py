"""Demo documents written when the registry is created for the first time."""

from __future__ import annotations

DEMO_SKILL: str = """# Senior Developer

You are an experienced senior developer. Write clean, maintainable, well documented code.

## Responsibilities
- Review and write high quality code
- Follow SOLID principles and good practices
- Document architecture decisions

## Constraints
- Do not use `any` in TypeScript
- Always write tests for critical logic
"""

DEMO_AGENT: str = """# Code Reviewer

Act as a meticulous code reviewer. Analyse the code before approving it.

## Process
1. Check logical correctness
2. Look for possible bugs and edge cases
3. Suggest readability improvements
4. Confirm that adequate tests exist
"""

DEMO_RULE: str = """# Best Practices

## Naming
- Variables in camelCase
- Components in PascalCase
- Constants in UPPER_SNAKE_CASE

## Git
- Commit messages follow Conventional Commits
- Small pull requests focused on a single change
"""

# editor -> stack -> category -> (file name, content)
DEMO_LAYOUT: dict[str, dict[str, dict[str, tuple[str, str]]]] = {
    "antigravity": {
        "react": {
            "skills": ("senior-developer.md", DEMO_SKILL),
            "agents": ("code-reviewer.md", DEMO_AGENT),
        },
    },
    "cursor": {
        "react": {
            "rules": ("best-practices.md", DEMO_RULE),
        },
    },
    "vscode": {
        "react": {
            "instructions": ("senior-developer.md", DEMO_SKILL),
            "rules": ("best-practices.md", DEMO_RULE),
        },
    },
}
