from types import MappingProxyType

import pytest
from unitranslit import normalizer
from unitranslit.data.default_mappings import DEFAULT_MAPPINGS
from unitranslit.data.emoji_names import EMOJI_NAMES, ascii_label
from unitranslit.engine import (
    TABLE_PRIORITY,
    TransliterationEngine,
    default_engine,
    join_surrogate_pairs,
    transliterate,
)
from unitranslit.errors import InvalidEncoding, InvalidInput, InvalidMapping, TransliterationError
from unitranslit.normalizer import Normalization
from unitranslit.notation import MappingTable, prepare_table

NFD = Normalization.DECOMPOSE


class TestLanguages:
    def test_german_with_umlauts(self):
        assert transliterate("Fußgängerübergänge", NFD) == "Fussgaengeruebergaenge"

    def test_decomposed_umlauts(self):
        assert transliterate("Gru\u0308n", NFD) == "Gruen"

    def test_russian(self):
        assert transliterate("Я люблю единорогов", NFD) == "Ya lyublyu edinorogov"

    def test_russian_adjective_ending(self):
        assert transliterate("красный", NFD) == "krasniy"

    def test_arabic(self):
        assert transliterate("أنا أحب حيدات", NFD) == "ana ahb hydat"

    def test_vietnamese(self):
        assert transliterate("tôi yêu những chú kỳ lân", NFD) == "toi yeu nhung chu ky lan"

    def test_greek_with_tonos(self):
        assert transliterate("Καλημέρα", NFD) == "Kalimera"

    def test_central_european(self):
        text = "éáűőúóüöíÉÁŰÚŐÓÜÖÍôňúäéáýžťčšľÔŇÚÄÉÁÝŽŤČŠĽ"
        expected = "eauououeoeiEAUUOOUeOeIonuaeeayztcslONUAeEAYZTCSL"
        assert transliterate(text, NFD) == expected

    def test_english_with_symbols_and_accents(self):
        assert transliterate("I ❤ cofée", NFD) == "I red heart cofee"

    def test_complex_eol(self):
        text = (
            "To insert this: \tPress these keys:\r\n"
            "à, è, ì, ò, ù, À, È, Ì, Ò, Ù \tCtrl+` (accent grave), the letter\r\n"
            "ä, ë, ï, ö, ü, ÿ, Ä, Ë, Ï, Ö, Ü, Ÿ\tCtrl+Shift+: (colon), the letter\r\n"
            "æ, Æ\tCtrl+Shift+& (ampersand), a or A\r\n"
            "œ, Œ\tCtrl+Shift+& (ampersand), o or O\r\n"
            "ð, Ð\tCtrl+' (apostrophe), d or D\r\n"
            "ø, Ø\tCtrl+/, o or O\r\n"
            "¿\tAlt+Ctrl+Shift+?\r\n"
            "ß\tCtrl+Shift+&, s"
        )
        expected = (
            "To insert this: \tPress these keys:\r\n"
            "a, e, i, o, u, A, E, I, O, U \tCtrl+` (accent grave), the letter\r\n"
            "ae, e, i, oe, ue, y, Ae, E, I, Oe, Ue, Y\tCtrl+Shift+: (colon), the letter\r\n"
            "ae, AE\tCtrl+Shift+& (ampersand), a or A\r\n"
            "œ, Œ\tCtrl+Shift+& (ampersand), o or O\r\n"
            "d, D\tCtrl+' (apostrophe), d or D\r\n"
            "o, O\tCtrl+/, o or O\r\n"
            "¿\tAlt+Ctrl+Shift+?\r\n"
            "ss\tCtrl+Shift+&, s"
        )
        assert transliterate(text, NFD) == expected


class TestEmoji:
    def test_nerd_face(self):
        assert transliterate("🤓", NFD) == "nerd face"

    def test_zwj_sequence_beats_its_parts(self):
        assert transliterate("\U0001F642\u200d\u2194\ufe0f", NFD) == "head shaking horizontally"

    def test_complex_text(self):
        text = "你好, 世界! This is a test with ümlauts(üöä) and emojis 😊👍."
        expected = (
            "你好, 世界! This is a test with uemlauts(ueoeae) "
            "and emojis smiling face with smiling eyesthumbs up."
        )
        assert transliterate(text, NFD) == expected

    def test_surrogate_pair_input(self):
        assert transliterate("\ud83e\udd13", NFD) == "nerd face"

    def test_derived_names_are_folded(self):
        assert transliterate("\U0001FA85", NFD) == "pinata"
        assert transliterate("\U0001F1E8\U0001F1FC", NFD) == "Curacao"
        assert transliterate("\U0001F1E8\U0001F1EE", NFD) == "Cote d'Ivoire"

    def test_ascii_label(self):
        assert ascii_label("piñata") == "pinata"
        assert ascii_label("flag Türkiye") == "flag Tuerkiye"
        assert ascii_label("flag Åland Islands") == "flag Aland Islands"
        assert ascii_label("flag Côte d\u2019Ivoire") == "flag Cote d'Ivoire"


class TestMatching:
    def test_longest_match_wins(self):
        custom = {"ab": "X", "a": "Y", "b": "Z"}
        assert transliterate("ab", NFD, use_default_mapping=False, custom_mapping=custom) == "X"
        assert transliterate("abb", NFD, use_default_mapping=False, custom_mapping=custom) == "XZ"

    def test_custom_mapping(self):
        assert transliterate("test_custom", NFD, True, {"_": "-"}) == "test-custom"

    def test_custom_mapping_overrides_default(self):
        assert transliterate("ee", NFD, True, {"e": "x"}) == "xx"

    def test_custom_mapping_overrides_default_letter(self):
        assert transliterate("ä", NFD, True, {"ä": "a"}) == "a"

    def test_custom_key_written_as_surrogate_pair(self):
        custom = {"\ud83e\udd13": "geek"}
        assert transliterate("a\U0001F913", NFD, True, custom) == "ageek"
        assert transliterate("a\ud83e\udd13", NFD, True, custom) == "ageek"

    def test_custom_mapping_is_not_retained(self):
        transliterate("ä", NFD, True, {"ä": "a"})
        assert transliterate("ä", NFD) == "ae"

    def test_unmapped_text_equals_plain_normalization(self):
        text = "Crème brûlée, s'il vous plaît"
        assert transliterate(text, NFD) == normalizer.apply(text, NFD)

    def test_fast_path_only_normalizes(self):
        assert transliterate("Fußgänger 🤓", NFD, use_default_mapping=False) == "Fußganger 🤓"

    def test_compose_keeps_precomposed_letters(self):
        assert transliterate("cofée", Normalization.COMPOSE) == "cofée"

    def test_mode_accepts_form_name(self):
        assert transliterate("x²", "NFKD") == "x2"

    def test_idempotent_on_own_output(self):
        first = transliterate("Fußgängerübergänge 🤓 Я люблю", NFD)
        assert transliterate(first, NFD) == first


class TestErrors:
    @pytest.mark.parametrize("text", [None, "", "   \t\n"])
    def test_empty_input(self, text):
        with pytest.raises(InvalidInput):
            transliterate(text, NFD)

    def test_invalid_unicode_string(self):
        with pytest.raises(InvalidEncoding):
            transliterate("ValidPart\ud800AnotherValidPart", NFD)

    def test_noncharacter(self):
        with pytest.raises(InvalidEncoding):
            transliterate("abc\ufdd0", NFD)

    def test_key_too_long(self):
        with pytest.raises(InvalidMapping):
            transliterate("abc", NFD, True, {"toolongkey": "x"})

    def test_six_grapheme_key_is_accepted(self):
        assert transliterate("sixsix!", NFD, True, {"sixsix": "6"}) == "6!"

    def test_input_checked_before_mapping(self):
        with pytest.raises(InvalidInput):
            transliterate("", NFD, True, {"toolongkey": "x"})

    def test_encoding_checked_before_mapping(self):
        with pytest.raises(InvalidEncoding):
            transliterate("\udc00", NFD, True, {"toolongkey": "x"})

    def test_unknown_mode_is_not_an_input_error(self):
        with pytest.raises(ValueError) as excinfo:
            transliterate("abc", "NFX")
        assert not isinstance(excinfo.value, TransliterationError)


class TestEngine:
    def test_priority_order(self):
        engine = default_engine()
        tables = engine.active_tables(True, {"e": "x"})
        assert tuple(table.name for table in tables) == TABLE_PRIORITY

    def test_no_reference_tables(self):
        engine = default_engine()
        assert [t.name for t in engine.active_tables(False, {"e": "x"})] == ["custom"]
        assert engine.active_tables(False, None) == []

    def test_default_engine_is_built_once(self):
        assert default_engine() is default_engine()

    def test_notation_fallback(self):
        # A table whose raw data was never converted to literal keys.
        default_table = MappingTable(
            name="default",
            entries=MappingProxyType({}),
            raw=MappingProxyType({"U+00E4": "ae"}),
        )
        engine = TransliterationEngine(
            emoji_table=MappingTable.from_notation({}, name="emoji"),
            default_table=default_table,
        )
        assert engine.transliterate("B\u00e4r", NFD) == "Baer"

    def test_join_surrogate_pairs(self):
        assert join_surrogate_pairs("a\ud83e\udd13b") == "a\U0001F913b"
        assert join_surrogate_pairs("plain") == "plain"


@pytest.mark.dataset
def test_default_mappings_dataset():
    for key, expected in prepare_table(DEFAULT_MAPPINGS).items():
        assert transliterate(key, NFD) == expected, key


@pytest.mark.dataset
def test_emoji_names_dataset():
    for key, expected in prepare_table(EMOJI_NAMES).items():
        assert transliterate(key, NFD) == expected, key
