"""
Reaction toggling.

'toggle_reaction' is the only place reaction entries are created, changed or
removed. It is a pure function: it receives a message's reaction list and
returns the next list without touching the input.

The local session can only add or withdraw its own single contribution:

    absent                         -> appended with count 1, user_reacted
    user_reacted, count == 1       -> removed
    user_reacted, count > 1        -> count - 1, not user_reacted
    not user_reacted               -> count + 1, user_reacted

Entries keep their position; only newly created entries go to the end.
"""

from collections.abc import Sequence

from chat_widget_core.conversation.data_models.reaction import Reaction


def toggle_reaction(reactions: Sequence[Reaction], emoji: str) -> list[Reaction]:
    if not emoji:
        raise ValueError("emoji must not be empty")

    next_reactions: list[Reaction] = []
    found = False
    for reaction in reactions:
        if reaction.emoji != emoji:
            next_reactions.append(reaction)
            continue

        found = True
        if not reaction.user_reacted:
            next_reactions.append(reaction.model_copy(update={"count": reaction.count + 1, "user_reacted": True}))
        elif reaction.count > 1:
            next_reactions.append(reaction.model_copy(update={"count": reaction.count - 1, "user_reacted": False}))
        # the local contribution was the last one: drop the entry

    if not found:
        next_reactions.append(Reaction(emoji=emoji, count=1, user_reacted=True))
    return next_reactions
