# voicelog/core/transitions.py

JOIN = "join"
LEAVE = "leave"
MOVE = "move"
NONE = "none"


def classify(before_channel_id, after_channel_id):
    """
    Classify a voice state change by its channel ids.

      None -> id   join
      id   -> None leave
      a    -> b    move (not logged, registry untouched)
      else         none
    """
    if before_channel_id is None and after_channel_id is not None:
        return JOIN
    if before_channel_id is not None and after_channel_id is None:
        return LEAVE
    if before_channel_id is not None and before_channel_id != after_channel_id:
        return MOVE
    return NONE
