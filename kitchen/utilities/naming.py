"""Name normalization shared by storages, recipes and the inventory manager."""


def create_key(name) -> str:
    '''Identity key of a name: whitespace collapsed and lower-cased.'''
    if name is None:
        return ""
    if not isinstance(name, str):
        name = getattr(name, "name", "")
    return " ".join(name.split()).lower()


def capitalize_each_word(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split())
