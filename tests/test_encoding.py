# Tests for actionsync.utils.encoding

from actionsync.utils.encoding import decode_script, encode_script


class TestEncodeScript:
    """Tests for encode_script."""

    def test_reserved_characters_escaped(self):
        assert encode_script("a b&c=d/e?f#g") == "a%20b%26c%3Dd%2Fe%3Ff%23g"

    def test_newlines_and_quotes_escaped(self):
        assert encode_script('print("hi")\n') == "print(%22hi%22)%0A"

    def test_unreserved_characters_kept(self):
        assert encode_script("AZaz09-_.!~*'()") == "AZaz09-_.!~*'()"

    def test_non_ascii_utf8(self):
        assert encode_script("é") == "%C3%A9"
        assert encode_script("日") == "%E6%97%A5"

    def test_output_is_ascii(self):
        encoded = encode_script("x = 'naïve'\t# 😀\r\n")
        assert encoded.isascii()
        assert "\n" not in encoded and "\t" not in encoded


class TestRoundTrip:
    """Decoding reverses encoding exactly."""

    def test_mixed_text(self):
        text = 'def main():\n    print("Grüße, 世界")\n    return \'done\'  # 100% \\ ok\n'
        assert decode_script(encode_script(text)) == text

    def test_empty(self):
        assert decode_script(encode_script("")) == ""

    def test_percent_and_plus(self):
        text = "a+b %20 %%"
        assert decode_script(encode_script(text)) == text
