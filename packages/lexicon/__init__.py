from .dictionary import BaseDictionary, WordListDictionary, load_dictionary

__all__ = ["BaseDictionary", "WordListDictionary", "load_dictionary"]
