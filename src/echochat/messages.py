"""User-visible message catalogs.

Every string the loop writes comes from a ``Catalog``. Two catalogs ship:
English (the default) and Japanese. They differ in wording only; the slots
and the exit sentinel are the same.

Example:
    from echochat.messages import get_catalog

    catalog = get_catalog("ja")
    print(catalog.render_response("hello"))  # EchoChat: 「hello」と入力しましたね。
"""

from pydantic import BaseModel, ConfigDict, Field

from echochat.errors import UnknownLanguageError

EXIT_SENTINEL = "exit"


class Catalog(BaseModel):
    """Fixed strings for each output slot of the loop.

    ``instructions`` may reference ``{sentinel}``. ``response`` must
    reference ``{text}``; the user's line is substituted verbatim between
    ``open_quote`` and ``close_quote``.
    """

    model_config = ConfigDict(frozen=True)

    welcome: str
    instructions: str
    prompt: str = Field(description="Written before each read, without a newline")
    goodbye: str
    empty: str
    response: str
    open_quote: str
    close_quote: str

    def render_instructions(self) -> str:
        return self.instructions.format(sentinel=EXIT_SENTINEL)

    def render_response(self, text: str) -> str:
        """Wrap ``text`` in the catalog's quotes and response label."""
        quoted = f"{self.open_quote}{text}{self.close_quote}"
        return self.response.format(text=quoted)


ENGLISH = Catalog(
    welcome="Welcome to EchoChat!",
    instructions="Type '{sentinel}' to quit.",
    prompt="You: ",
    goodbye="Exiting EchoChat.",
    empty="EchoChat: Please enter something.",
    response="EchoChat: You entered {text}.",
    open_quote='"',
    close_quote='"',
)

JAPANESE = Catalog(
    welcome="EchoChat へようこそ！",
    instructions="終了するには '{sentinel}' と入力してください。",
    prompt="あなた: ",
    goodbye="EchoChat を終了します。",
    empty="EchoChat: 何か入力してください。",
    response="EchoChat: {text}と入力しましたね。",
    open_quote="「",
    close_quote="」",
)

CATALOGS: dict[str, Catalog] = {
    "en": ENGLISH,
    "ja": JAPANESE,
}


def get_catalog(lang: str) -> Catalog:
    """Look up the catalog for a language code.

    Raises:
        UnknownLanguageError: If no catalog exists for ``lang``.
    """
    try:
        return CATALOGS[lang]
    except KeyError:
        raise UnknownLanguageError(lang) from None
