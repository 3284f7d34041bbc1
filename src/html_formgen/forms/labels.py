"""
Human readable labels for field keys.

labelize() turns identifiers into labels:

    bond_fund => Bond fund
    bondFund  => Bond fund
    bondFUND  => Bond fund

An all-caps run collapses without internal spaces, so BONDFund becomes
"Bondfund".
"""


def labelize(name: str) -> str:
    """
    Convert an identifier into a human readable label.

    The first character is upper cased, underscores become spaces and a
    space is inserted before an upper case run unless the previous
    character was already upper case. Upper case characters after the
    first are lowered.

    Example:
        >>> labelize("date_layout")
        'Date layout'
        >>> labelize("group01")
        'Group 01'
    """
    chars = []
    previous_upper = False
    for idx, char in enumerate(name):
        if idx == 0:
            chars.append(char.upper())
            previous_upper = True
            continue
        if char == "_":
            char = " "
        if char.upper() == char:
            if not previous_upper and char != " ":
                chars.append(" ")
            chars.append(char.lower())
            previous_upper = True
        else:
            chars.append(char)
            previous_upper = False
    return "".join(chars)


def access_keyify(label: str, access_key: str) -> str:
    """
    Underline the first occurrence of the access key inside a label.

    Matching is case-insensitive; the label keeps its own casing.
    'Date layout' with access key 't' becomes 'Da<u>t</u>e layout'.
    """
    if not access_key:
        return label
    key = access_key[0].lower()
    for idx, char in enumerate(label):
        if char.lower() == key:
            return f"{label[:idx]}<u>{char}</u>{label[idx + 1:]}"
    return label
