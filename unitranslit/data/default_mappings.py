# unitranslit/data/default_mappings.py
from types import MappingProxyType

# Letters that normalization alone cannot bring down to ASCII, keyed by codepoint notation.
# Letters with a canonical decomposition (é, ñ, ç, ...) are left to the normalizer.
_LATIN = {
    # German umlauts and sharp s, precomposed.
    "U+00E4": "ae",
    "U+00C4": "Ae",
    "U+00F6": "oe",
    "U+00D6": "Oe",
    "U+00FC": "ue",
    "U+00DC": "Ue",
    "U+00DF": "ss",
    "U+1E9E": "SS",
    # The same umlauts typed as base letter + combining diaeresis.
    "U+0061 U+0308": "ae",
    "U+0041 U+0308": "Ae",
    "U+006F U+0308": "oe",
    "U+004F U+0308": "Oe",
    "U+0075 U+0308": "ue",
    "U+0055 U+0308": "Ue",
    # Nordic and Icelandic.
    "U+00E6": "ae",
    "U+00C6": "AE",
    "U+00F8": "o",
    "U+00D8": "O",
    "U+00F0": "d",
    "U+00D0": "D",
    "U+00FE": "th",
    "U+00DE": "Th",
    # Central European, Vietnamese, Turkish, Maltese.
    "U+0142": "l",
    "U+0141": "L",
    "U+0111": "d",
    "U+0110": "D",
    "U+0131": "i",
    "U+0127": "h",
    "U+0126": "H",
    "U+0167": "t",
    "U+0166": "T",
    # Ligatures.
    "U+0133": "ij",
    "U+0132": "IJ",
    "U+FB00": "ff",
    "U+FB01": "fi",
    "U+FB02": "fl",
}

_CYRILLIC = {
    "U+0410": "A",
    "U+0430": "a",
    "U+0411": "B",
    "U+0431": "b",
    "U+0412": "V",
    "U+0432": "v",
    "U+0413": "G",
    "U+0433": "g",
    "U+0414": "D",
    "U+0434": "d",
    "U+0415": "E",
    "U+0435": "e",
    "U+0401": "Yo",
    "U+0451": "yo",
    "U+0416": "Zh",
    "U+0436": "zh",
    "U+0417": "Z",
    "U+0437": "z",
    "U+0418": "I",
    "U+0438": "i",
    "U+0419": "Y",
    "U+0439": "y",
    "U+041A": "K",
    "U+043A": "k",
    "U+041B": "L",
    "U+043B": "l",
    "U+041C": "M",
    "U+043C": "m",
    "U+041D": "N",
    "U+043D": "n",
    "U+041E": "O",
    "U+043E": "o",
    "U+041F": "P",
    "U+043F": "p",
    "U+0420": "R",
    "U+0440": "r",
    "U+0421": "S",
    "U+0441": "s",
    "U+0422": "T",
    "U+0442": "t",
    "U+0423": "U",
    "U+0443": "u",
    "U+0424": "F",
    "U+0444": "f",
    "U+0425": "Kh",
    "U+0445": "kh",
    "U+0426": "Ts",
    "U+0446": "ts",
    "U+0427": "Ch",
    "U+0447": "ch",
    "U+0428": "Sh",
    "U+0448": "sh",
    "U+0429": "Shch",
    "U+0449": "shch",
    "U+042A": "",
    "U+044A": "",
    "U+042B": "Y",
    "U+044B": "y",
    "U+042C": "",
    "U+044C": "",
    "U+042D": "E",
    "U+044D": "e",
    "U+042E": "Yu",
    "U+044E": "yu",
    "U+042F": "Ya",
    "U+044F": "ya",
    # Adjective endings read as one sound.
    "U+044B U+0439": "iy",
    "U+042B U+0439": "Iy",
    "U+042B U+0419": "IY",
    "U+044B U+0419": "iY",
    # Ukrainian and Belarusian.
    "U+0404": "Ye",
    "U+0454": "ye",
    "U+0406": "I",
    "U+0456": "i",
    "U+0407": "Yi",
    "U+0457": "yi",
    "U+0490": "G",
    "U+0491": "g",
    "U+040E": "U",
    "U+045E": "u",
}

_GREEK = {
    "U+0391": "A",
    "U+03B1": "a",
    "U+0392": "V",
    "U+03B2": "v",
    "U+0393": "G",
    "U+03B3": "g",
    "U+0394": "D",
    "U+03B4": "d",
    "U+0395": "E",
    "U+03B5": "e",
    "U+0396": "Z",
    "U+03B6": "z",
    "U+0397": "I",
    "U+03B7": "i",
    "U+0398": "Th",
    "U+03B8": "th",
    "U+0399": "I",
    "U+03B9": "i",
    "U+039A": "K",
    "U+03BA": "k",
    "U+039B": "L",
    "U+03BB": "l",
    "U+039C": "M",
    "U+03BC": "m",
    "U+039D": "N",
    "U+03BD": "n",
    "U+039E": "X",
    "U+03BE": "x",
    "U+039F": "O",
    "U+03BF": "o",
    "U+03A0": "P",
    "U+03C0": "p",
    "U+03A1": "R",
    "U+03C1": "r",
    "U+03A3": "S",
    "U+03C3": "s",
    "U+03C2": "s",
    "U+03A4": "T",
    "U+03C4": "t",
    "U+03A5": "Y",
    "U+03C5": "y",
    "U+03A6": "F",
    "U+03C6": "f",
    "U+03A7": "Ch",
    "U+03C7": "ch",
    "U+03A8": "Ps",
    "U+03C8": "ps",
    "U+03A9": "O",
    "U+03C9": "o",
    # Tonos and dialytika forms would otherwise decompose back to Greek letters.
    "U+0386": "A",
    "U+03AC": "a",
    "U+0388": "E",
    "U+03AD": "e",
    "U+0389": "I",
    "U+03AE": "i",
    "U+038A": "I",
    "U+03AF": "i",
    "U+038C": "O",
    "U+03CC": "o",
    "U+038E": "Y",
    "U+03CD": "y",
    "U+038F": "O",
    "U+03CE": "o",
    "U+03CA": "i",
    "U+03CB": "y",
}

_ARABIC = {
    "U+0621": "'",
    "U+0622": "aa",
    "U+0623": "a",
    "U+0625": "i",
    "U+0627": "a",
    "U+0628": "b",
    "U+0629": "h",
    "U+062A": "t",
    "U+062B": "th",
    "U+062C": "j",
    "U+062D": "h",
    "U+062E": "kh",
    "U+062F": "d",
    "U+0630": "dh",
    "U+0631": "r",
    "U+0632": "z",
    "U+0633": "s",
    "U+0634": "sh",
    "U+0635": "s",
    "U+0636": "d",
    "U+0637": "t",
    "U+0638": "z",
    "U+0639": "'",
    "U+063A": "gh",
    "U+0641": "f",
    "U+0642": "q",
    "U+0643": "k",
    "U+0644": "l",
    "U+0645": "m",
    "U+0646": "n",
    "U+0647": "h",
    "U+0648": "w",
    "U+0649": "a",
    "U+064A": "y",
}

DEFAULT_MAPPINGS = MappingProxyType({**_LATIN, **_CYRILLIC, **_GREEK, **_ARABIC})
