"""Provider metadata for choosing in-process or external implementations.

Two components have both kinds:

- ``persistence``: in-memory collections (local) or PostgreSQL (production)
- ``profanity``: pass-through filter (local) or the APILayer service (production)

``local_components`` in ``qna.util.di.container`` picks one per component from
the settings; tests pick them with ``build_test_container(unmock=...)``.
"""

from typing import ClassVar, Literal, get_args

from dishka import Provider

Component = Literal["persistence", "profanity"]

COMPONENTS: tuple[Component, ...] = get_args(Component)


class ProviderBase(Provider):
    """Provider tagged with the component it implements.

    Config, domain and application providers leave ``__component__`` unset and
    are always installed. A component base sets it, and each subclass sets
    ``__is_local__`` to say whether it runs without the database or network.
    """

    __component__: ClassVar[Component | None] = None
    __is_local__: ClassVar[bool] = False
