"""Tests for the INI byte parser."""

import logging

import pytest

from pylibini.ini.errors import CapacityError, IniSyntaxError
from pylibini.ini.model import Float, IniDocument, Integer, Text
from pylibini.ini.parser import IniParser

parse = IniParser.parse


# ---------------------------------------------------------------------------
# value type inference
# ---------------------------------------------------------------------------

@pytest.mark.parametrize('line, expected', [
    (b'Age=32\n', Integer(32)),
    (b'RandomNum=654.956\n', Float(654.956)),
    (b'Name=John\n', Text('John')),
    (b'N=-1\n', Integer(-1)),
    (b'F=-0.5\n', Float(-0.5)),
    (b'P=+7\n', Integer(7)),
    (b'E=1e10\n', Text('1e10')),
    (b'S= 1\n', Text(' 1')),
    (b'Full=John Smith\n', Text('John Smith')),
    (b'Dot=.5\n', Float(0.5)),
])
def test_type_inference(line, expected):
    doc = parse(line)
    assert doc[0][0].value == expected


def test_empty_value_is_zero():
    assert parse(b'A=\n').get('', 'A') == Integer(0)


def test_lenient_number_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger='pylibini.ini.parser'):
        doc = parse(b'A=1-2\nB=#\n')
    assert doc.get('', 'A') == Integer(1)
    assert doc.get('', 'B') == Integer(0)
    assert 'trailing garbage' in caplog.text
    assert 'not a number' in caplog.text


def test_integer_overflow():
    with pytest.raises(CapacityError):
        parse(b'A=99999999999\n')


# ---------------------------------------------------------------------------
# sections
# ---------------------------------------------------------------------------

def test_global_section():
    doc = parse(b'GlobalKey=1\n[Person]\nName=John\n')
    assert doc.exists('', 'GlobalKey')
    assert doc.get('', 'GlobalKey') == Integer(1)
    assert doc.get('Person', 'Name') == Text('John')
    assert [s.name for s in doc] == ['', 'Person']


def test_no_global_section_without_global_keys():
    doc = parse(b'[Person]\nName=John\n')
    assert [s.name for s in doc] == ['Person']


def test_duplicate_section_headers_are_not_merged():
    doc = parse(b'[A]\nX=1\n[A]\nY=2\n')
    assert [s.name for s in doc] == ['A', 'A']
    assert doc.exists('A', 'X')
    assert not doc.exists('A', 'Y')
    assert doc[1].find_key('Y').value == Integer(2)


def test_section_name_keeps_dots_and_spaces():
    doc = parse(b'[Person.Random Stats]\nN=1\n')
    assert doc[0].name == 'Person.Random Stats'


def test_text_right_after_header():
    doc = parse(b'[A]B=1\n')
    assert doc.get('A', 'B') == Integer(1)


# ---------------------------------------------------------------------------
# comments, whitespace & line endings
# ---------------------------------------------------------------------------

def test_comment_lines_are_ignored():
    assert parse(b';comment\nKey=1\n') == parse(b'Key=1\n')


def test_comment_with_tab_is_still_a_comment():
    doc = parse(b';a\tcomment\nKey=1\n')
    assert doc.get('', 'Key') == Integer(1)


def test_blank_lines_and_indent_skipped():
    doc = parse(b'\n\n   \t[A]\n\n  X=1\n\n')
    assert doc.get('A', 'X') == Integer(1)


def test_crlf_line_endings():
    doc = parse(b'[A]\r\nX=5\r\nY=x y\r\n;c\r\nZ=1.5\r\n')
    assert doc.get('A', 'X') == Integer(5)
    assert doc.get('A', 'Y') == Text('x y')
    assert doc.get('A', 'Z') == Float(1.5)


def test_last_line_without_newline():
    assert parse(b'A=5').get('', 'A') == Integer(5)


def test_key_name_is_taken_verbatim():
    doc = parse(b'Key =1\n')
    assert doc.exists('', 'Key ')
    assert not doc.exists('', 'Key')


# ---------------------------------------------------------------------------
# early stop on control bytes
# ---------------------------------------------------------------------------

def test_control_byte_stops_parsing():
    doc = parse(b'A=1\n\x00B=2\n')
    assert doc.exists('', 'A')
    assert not doc.exists('', 'B')


def test_control_byte_in_comment_stops_parsing():
    doc = parse(b'A=1\n;abc\x01\nB=2\n')
    assert doc.exists('', 'A')
    assert not doc.exists('', 'B')


def test_empty_input():
    assert len(parse(b'')) == 0


# ---------------------------------------------------------------------------
# failures
# ---------------------------------------------------------------------------

def test_unexpected_leading_byte():
    with pytest.raises(IniSyntaxError) as exc:
        parse(b'A=1\n#x\n')
    assert exc.value.offset == 4
    assert exc.value.byte == ord('#')
    assert '0x23' in str(exc.value)


def test_digit_cannot_start_a_key():
    with pytest.raises(IniSyntaxError) as exc:
        parse(b'1=2\n')
    assert exc.value.offset == 0


def test_non_ascii_cannot_start_a_key():
    with pytest.raises(IniSyntaxError):
        parse('é=1\n'.encode('utf-8'))


def test_unterminated_key_name():
    with pytest.raises(IniSyntaxError, match='unterminated key name'):
        parse(b'A=1\nKey\n')


def test_unterminated_section_name():
    with pytest.raises(IniSyntaxError, match='unterminated section name'):
        parse(b'[Foo\nA=1\n')


def test_undecodable_text():
    with pytest.raises(IniSyntaxError) as exc:
        parse(b'A=x\xff\n')
    assert exc.value.offset == 3


def test_key_name_capacity():
    parse(b'k' * 127 + b'=1\n')
    with pytest.raises(CapacityError):
        parse(b'k' * 128 + b'=1\n')


def test_value_capacity():
    parse(b'A=' + b'v' * 127 + b'\n')
    with pytest.raises(CapacityError):
        parse(b'A=' + b'v' * 128 + b'\n')


def test_section_name_capacity():
    with pytest.raises(CapacityError):
        parse(b'[' + b's' * 128 + b']\n')


def test_capacity_counts_bytes_in_file_encoding():
    # 91 bytes in GBK, 136 in UTF-8.
    name = 'K' + '中' * 45
    doc = parse(f'[{name}]\n{name}=1\n'.encode('gbk'), encoding='gbk')
    assert doc.get(name, name) == Integer(1)
    # 101 bytes in Latin-1, 201 in UTF-8.
    doc = parse(b'A=x' + b'\xe9' * 100 + b'\n', encoding='latin-1')
    assert doc.get('', 'A').value == 'x' + 'é' * 100


# ---------------------------------------------------------------------------
# parsing into an existing document
# ---------------------------------------------------------------------------

def test_parse_into_appends_sections():
    doc = IniDocument()
    doc.add_or_append_key('', 'G', Integer(1))
    ret = parse(b'H=2\n[A]\nX=1\n', doc)
    assert ret is doc
    assert [s.name for s in doc] == ['', '', 'A']
    # second global section is shadowed by the first.
    assert not doc.exists('', 'H')
    assert doc.exists('A', 'X')


def test_failed_parse_leaves_target_untouched():
    doc = IniDocument()
    doc.add_or_append_key('A', 'X', Integer(1))
    with pytest.raises(IniSyntaxError):
        parse(b'[B]\nY=2\n!', doc)
    assert [s.name for s in doc] == ['A']


def test_parse_other_encoding():
    doc = parse('Name=Привет мир\n'.encode('cp1251'), encoding='cp1251')
    assert doc.get('', 'Name') == Text('Привет мир')
