import os


ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _parse_dotenv_line(raw: str) -> tuple[str, str] | None:
    line = raw.strip()
    if line.startswith("export "):
        line = line[len("export "):]
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, val = (part.strip() for part in line.split("=", 1))
    if not key:
        return None
    if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
        val = val[1:-1].strip()
    return key, val


def bootstrap_env() -> None:
    """Seed os.environ from the project .env (or MCP_TIME_ENV_FILE); existing values win."""
    env_file = env("MCP_TIME_ENV_FILE") or os.path.join(ROOT_DIR, ".env")
    try:
        with open(env_file, "r", encoding="utf-8") as f:
            pairs = [p for p in map(_parse_dotenv_line, f) if p]
    except OSError:
        return
    for k, v in pairs:
        os.environ.setdefault(k, v)


def env(name: str) -> str | None:
    v = str(os.environ.get(name) or "").strip()
    return v or None


def env_int(name: str, default: int) -> int:
    raw = env(name)
    try:
        return int(raw) if raw is not None else int(default)
    except ValueError:
        return int(default)
