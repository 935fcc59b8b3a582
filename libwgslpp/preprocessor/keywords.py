from enum import Enum, auto

DIRECTIVE_MARK = "#"


class PreprocessorKeyword(Enum):
    DEFINE = auto()
    UNDEFINE = auto()

    INCLUDE = auto()


WORD_TO_PREPROCESSOR_KEYWORD = {
    "#include": PreprocessorKeyword.INCLUDE,
    "#define": PreprocessorKeyword.DEFINE,
    "#undef": PreprocessorKeyword.UNDEFINE,
}
