class ParserConfig:
    def __init__(
        self,
        strict: bool = False,
        keep_unknown_fields: bool = True,
        allow_duplicate_ids: bool = False,
        **kwargs
    ):
        # fail when a constructor leaves fields it does not understand
        self.strict = strict
        # keep leftover fields on the object so the printer can write them back
        self.keep_unknown_fields = keep_unknown_fields
        # let ObjectGraph.insert overwrite an existing identifier
        self.allow_duplicate_ids = allow_duplicate_ids
        self.__dict__.update(kwargs)


DEFAULT_CONFIG = ParserConfig()
