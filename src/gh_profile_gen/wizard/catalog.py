"""
Static option lists offered by the wizard.

Skill categories are kept in display order; their keys double as the
``Skills`` field names they are written to.
"""

from gh_profile_gen.config.profile import HeaderStyle, ProjectDisplay, Template

SKILL_CATALOG: dict[str, tuple[str, ...]] = {
    "languages": (
        "Rust", "Python", "TypeScript", "JavaScript", "Go", "C", "C++", "Java",
        "Kotlin", "Swift", "Ruby", "PHP", "Elixir", "Haskell", "Scala", "Zig",
        "Lua", "Dart", "R", "Shell/Bash",
    ),
    "frameworks": (
        "React", "Vue.js", "Svelte", "Angular", "Next.js", "Actix", "Axum",
        "Rocket", "Django", "Flask", "FastAPI", "Ruby on Rails", "Spring",
        "Express", "Gin", "Echo",
    ),
    "tools": (
        "Docker", "Git", "Neovim", "VS Code", "GitHub Actions", "Terraform",
        "Ansible", "Kubernetes", "Nginx", "Linux",
    ),
    "databases": (
        "PostgreSQL", "MySQL", "SQLite", "MongoDB", "Redis", "DynamoDB",
        "CockroachDB", "ClickHouse",
    ),
    "cloud": (
        "AWS", "GCP", "Azure", "Vercel", "Cloudflare", "DigitalOcean", "Fly.io",
        "Heroku",
    ),
}

SKILL_CATEGORY_TITLES: dict[str, str] = {
    "languages": "Languages",
    "frameworks": "Frameworks",
    "tools": "Tools",
    "databases": "Databases",
    "cloud": "Cloud",
}

STATS_THEMES: tuple[str, ...] = (
    "default",
    "tokyonight",
    "dark",
    "radical",
    "merko",
    "gruvbox",
    "onedark",
    "cobalt",
    "synthwave",
    "dracula",
    "highcontrast",
)

TOP_LANGS_LAYOUTS: tuple[str, ...] = ("compact", "normal", "donut", "donut-vertical", "pie")

HEADER_STYLES: tuple[HeaderStyle, ...] = tuple(HeaderStyle)
PROJECT_DISPLAYS: tuple[ProjectDisplay, ...] = tuple(ProjectDisplay)
TEMPLATES: tuple[Template, ...] = tuple(Template)
