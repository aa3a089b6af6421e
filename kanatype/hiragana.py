"""Incremental romaji to hiragana conversion."""

from __future__ import annotations

# Order matters only for readability; lookups are by exact key.
_ROMAJI_TABLE: dict[str, str] = {
    # Combined characters
    "kya": "きゃ", "kyu": "きゅ", "kyo": "きょ",
    "sha": "しゃ", "shu": "しゅ", "sho": "しょ",
    "cha": "ちゃ", "chu": "ちゅ", "cho": "ちょ",
    "nya": "にゃ", "nyu": "にゅ", "nyo": "にょ",
    "hya": "ひゃ", "hyu": "ひゅ", "hyo": "ひょ",
    "mya": "みゃ", "myu": "みゅ", "myo": "みょ",
    "rya": "りゃ", "ryu": "りゅ", "ryo": "りょ",
    "gya": "ぎゃ", "gyu": "ぎゅ", "gyo": "ぎょ",
    "ja": "じゃ", "ju": "じゅ", "jo": "じょ",
    "bya": "びゃ", "byu": "びゅ", "byo": "びょ",
    "pya": "ぴゃ", "pyu": "ぴゅ", "pyo": "ぴょ",
    # Basic characters
    "ka": "か", "ki": "き", "ku": "く", "ke": "け", "ko": "こ",
    "ga": "が", "gi": "ぎ", "gu": "ぐ", "ge": "げ", "go": "ご",
    "sa": "さ", "shi": "し", "su": "す", "se": "せ", "so": "そ",
    "za": "ざ", "ji": "じ", "zu": "ず", "ze": "ぜ", "zo": "ぞ",
    "ta": "た", "chi": "ち", "tsu": "つ", "te": "て", "to": "と",
    "da": "だ", "dzi": "ぢ", "dzu": "づ", "de": "で", "do": "ど",
    "na": "な", "ni": "に", "nu": "ぬ", "ne": "ね", "no": "の",
    "ha": "は", "hi": "ひ", "fu": "ふ", "he": "へ", "ho": "ほ",
    "ba": "ば", "bi": "び", "bu": "ぶ", "be": "べ", "bo": "ぼ",
    "pa": "ぱ", "pi": "ぴ", "pu": "ぷ", "pe": "ぺ", "po": "ぽ",
    "ma": "ま", "mi": "み", "mu": "む", "me": "め", "mo": "も",
    "ya": "や", "yu": "ゆ", "yo": "よ",
    "ra": "ら", "ri": "り", "ru": "る", "re": "れ", "ro": "ろ",
    "wa": "わ", "wo": "を", "n": "ん",
    # Vowels
    "a": "あ", "i": "い", "u": "う", "e": "え", "o": "お",
    # Small tsu for doubled consonants
    "kk": "っk", "ss": "っs", "tt": "っt", "pp": "っp",
    "gg": "っg", "zz": "っz", "dd": "っd", "bb": "っb",
}

_PREFIXES: frozenset[str] = frozenset(
    key[:length] for key in _ROMAJI_TABLE for length in range(1, len(key))
)


def romaji_to_hiragana(romaji: str) -> str:
    """Convert romaji to hiragana, keeping characters that match nothing.

    Input is consumed greedily: as soon as the pending characters form a
    table entry they are replaced, so a shorter entry wins over a longer one
    it starts (``"n"`` is taken before ``"na"`` can form). Characters that
    cannot start any entry are passed through unchanged, and an incomplete
    tail is kept as typed.
    """
    out: list[str] = []
    pending = ""
    for ch in romaji:
        pending += ch
        while pending:
            kana = _ROMAJI_TABLE.get(pending)
            if kana is not None:
                out.append(kana)
                pending = ""
                break
            if pending in _PREFIXES:
                break
            out.append(pending[0])
            pending = pending[1:]
    out.append(pending)
    return "".join(out)