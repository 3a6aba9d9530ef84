from __future__ import annotations

from pipelines import config, nox

# "desc" is a build metadata field name.
IGNORED_WORDS = ["desc"]


@nox.session()
def codespell(session: nox.Session) -> None:
    """Run codespell to check for spelling mistakes."""
    nox.sync(session, "codespell", project=False)
    session.run(
        "codespell",
        "--builtin",
        "clear,rare,code",
        "--ignore-words-list",
        ",".join(IGNORED_WORDS),
        *config.SPELLCHECK_PATHS,
    )
