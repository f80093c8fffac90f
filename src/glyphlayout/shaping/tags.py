"""Script and language code tables.

Legacy callers identify scripts and languages by small integer codes. The
tables below are indexed by those codes. Script entries are ISO 15924 tags,
which HarfBuzz accepts directly; language entries carry both the OpenType
language-system tag and the BCP 47 tag handed to HarfBuzz.
"""

from typing import NamedTuple


class LanguageTag(NamedTuple):
    """OpenType and BCP 47 tags for one language code."""

    ot_tag: str
    bcp47: str


# Indexed by script code.
SCRIPT_TAGS: tuple[str, ...] = (
    "Zyyy",  # 0 common
    "Zinh",  # 1 inherited
    "Arab",
    "Armn",
    "Beng",
    "Bopo",
    "Cher",
    "Copt",
    "Cyrl",
    "Dsrt",
    "Deva",  # 10
    "Ethi",
    "Geor",
    "Goth",
    "Grek",
    "Gujr",
    "Guru",
    "Hani",
    "Hang",
    "Hebr",
    "Hira",  # 20
    "Knda",
    "Kana",
    "Khmr",
    "Laoo",
    "Latn",
    "Mlym",
    "Mong",
    "Mymr",
    "Ogam",
    "Ital",  # 30
    "Orya",
    "Runr",
    "Sinh",
    "Syrc",
    "Taml",
    "Telu",
    "Thaa",
    "Thai",
    "Tibt",
    "Cans",  # 40
    "Yiii",
    "Tglg",
    "Hano",
    "Buhd",
    "Tagb",
    "Brai",
    "Cprt",
    "Limb",
    "Linb",
    "Osma",  # 50
    "Shaw",
    "Tale",
    "Ugar",
    "Hrkt",
    "Bugi",
    "Glag",
    "Khar",
    "Sylo",
    "Talu",
    "Tfng",  # 60
    "Xpeo",
    "Bali",
    "Batk",
    "Blis",
    "Brah",
    "Cham",
    "Cirt",
    "Cyrs",
    "Egyd",
    "Egyh",  # 70
    "Egyp",
    "Geok",
    "Hans",
    "Hant",
    "Hmng",
    "Hung",
    "Inds",
    "Java",
    "Kali",
    "Latf",  # 80
    "Latg",
    "Lepc",
    "Lina",
    "Mand",
    "Maya",
    "Mero",
    "Nkoo",
    "Orkh",
    "Perm",
    "Phag",  # 90
    "Phnx",
    "Plrd",
    "Roro",
    "Sara",
    "Syre",
    "Syrj",
    "Syrn",
    "Teng",
    "Vaii",
    "Visp",  # 100
    "Xsux",
    "Zxxx",
    "Zzzz",
)

# Indexed by language code; 0 means "no language".
LANGUAGE_TAGS: tuple[LanguageTag | None, ...] = (
    None,
    LanguageTag("ARA ", "ar"),
    LanguageTag("ASM ", "as"),
    LanguageTag("BEN ", "bn"),
    LanguageTag("FAR ", "fa"),
    LanguageTag("GUJ ", "gu"),
    LanguageTag("HIN ", "hi"),
    LanguageTag("IWR ", "he"),
    LanguageTag("JII ", "yi"),
    LanguageTag("JAN ", "ja"),
    LanguageTag("KAN ", "kn"),  # 10
    LanguageTag("KOK ", "kok"),
    LanguageTag("KOR ", "ko"),
    LanguageTag("KSM ", "ks"),
    LanguageTag("MAL ", "ml"),
    LanguageTag("MAR ", "mr"),
    LanguageTag("MLR ", "ml"),
    LanguageTag("MNI ", "mni"),
    LanguageTag("ORI ", "or"),
    LanguageTag("SAN ", "sa"),
    LanguageTag("SND ", "sd"),  # 20
    LanguageTag("SNH ", "si"),
    LanguageTag("SYR ", "syr"),
    LanguageTag("TAM ", "ta"),
    LanguageTag("TEL ", "te"),
    LanguageTag("THA ", "th"),
    LanguageTag("URD ", "ur"),
    LanguageTag("ZHP ", "zh"),
    LanguageTag("ZHS ", "zh-Hans"),
    LanguageTag("ZHT ", "zh-Hant"),
    LanguageTag("AFK ", "af"),  # 30
    LanguageTag("BEL ", "be"),
    LanguageTag("BGR ", "bg"),
    LanguageTag("CAT ", "ca"),
    LanguageTag("CHE ", "ce"),
    LanguageTag("COP ", "cop"),
    LanguageTag("CSY ", "cs"),
    LanguageTag("DAN ", "da"),
    LanguageTag("DEU ", "de"),
    LanguageTag("DZN ", "dz"),
    LanguageTag("ELL ", "el"),  # 40
    LanguageTag("ENG ", "en"),
    LanguageTag("ESP ", "es"),
    LanguageTag("ETI ", "et"),
    LanguageTag("EUQ ", "eu"),
    LanguageTag("FIN ", "fi"),
    LanguageTag("FRA ", "fr"),
    LanguageTag("GAE ", "gd"),
    LanguageTag("HAU ", "ha"),
    LanguageTag("HRV ", "hr"),
    LanguageTag("HUN ", "hu"),  # 50
    LanguageTag("HYE ", "hy"),
    LanguageTag("IND ", "id"),
    LanguageTag("ITA ", "it"),
    LanguageTag("KHM ", "km"),
    LanguageTag("MNG ", "mn"),
    LanguageTag("MTS ", "mt"),
    LanguageTag("NEP ", "ne"),
    LanguageTag("NLD ", "nl"),
    LanguageTag("PAS ", "ps"),
    LanguageTag("PLK ", "pl"),  # 60
    LanguageTag("PTG ", "pt"),
    LanguageTag("ROM ", "ro"),
    LanguageTag("RUS ", "ru"),
    LanguageTag("SKY ", "sk"),
    LanguageTag("SLV ", "sl"),
    LanguageTag("SQI ", "sq"),
    LanguageTag("SRB ", "sr"),
    LanguageTag("SVE ", "sv"),
    LanguageTag("TIB ", "bo"),
    LanguageTag("TRK ", "tr"),  # 70
    LanguageTag("WEL ", "cy"),
)

COMMON_SCRIPT_CODE = 0
LATIN_SCRIPT_CODE = SCRIPT_TAGS.index("Latn")
ENGLISH_LANGUAGE_CODE = 41


def script_tag(script_code: int) -> str | None:
    """ISO 15924 tag for a script code, or None if the code is unknown."""
    if 0 <= script_code < len(SCRIPT_TAGS):
        return SCRIPT_TAGS[script_code]
    return None


def language_tag(language_code: int) -> LanguageTag | None:
    """Tags for a language code, or None for "no language" or unknown codes."""
    if 0 <= language_code < len(LANGUAGE_TAGS):
        return LANGUAGE_TAGS[language_code]
    return None


def script_code_for_tag(tag: str) -> int | None:
    """Reverse lookup of a script code from an ISO 15924 tag (case-insensitive)."""
    wanted = tag.strip().lower()
    for code, candidate in enumerate(SCRIPT_TAGS):
        if candidate.lower() == wanted:
            return code
    return None


def language_code_for_tag(tag: str) -> int | None:
    """Reverse lookup of a language code from an OpenType or BCP 47 tag.

    The first matching entry wins, so "ml" resolves to the traditional
    Malayalam code.
    """
    wanted = tag.strip().lower()
    for code, entry in enumerate(LANGUAGE_TAGS):
        if entry is None:
            continue
        if entry.ot_tag.strip().lower() == wanted or entry.bcp47.lower() == wanted:
            return code
    return None
