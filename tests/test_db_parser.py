import json

import pytest

from flavorsheet.core.db_parser import DbParser
from flavorsheet.core.exceptions import SourceReadError
from flavorsheet.utils.config import ConfigManager

DB_SOURCE = """#module "db"
#deffunc db_creature int dbid, int dbmode
\tif ( dbid == CREATURE_ID_PUTIT ) {
\t\tif ( dbmode == DBMODE_SET ) {
\t\t\tcdatan(CDATAN_NAME, rc) = lang("プチ", "putit")
\t\t\treturn
\t\t}
\t\tif ( dbmode == DBMODE_FLAVOR_PASSIVE ) {
\t\t\ttxt lang("ぷよぷよ", "*wobble*"), lang("ぷるぷる", "*quiver*")
\t\t\treturn
\t\t}
\t\treturn
\t}
\tif ( dbid == CREATURE_ID_YETI ) {
\t\tif ( dbmode == DBMODE_SET ) {
\t\t\tcdatan(CDATAN_NAME, rc) = lang("イエティ", "yeti")
\t\t\treturn
\t\t}
\t\treturn
\t}
\tif ( dbid == CREATURE_ID_LITTLE_SISTER ) {
\t\tif ( dbmode == DBMODE_FLAVOR_WELCOME ) {
\t\t\ttxt lang("おかえり、" + _onii(cdata(CDATA_SEX, CHARA_PLAYER)) + "！", cnvtalk("Welcome home, " + _onii(cdata(CDATA_SEX, CHARA_PLAYER)) + "!"))
\t\t\treturn
\t\t}
\t\tif ( dbmode == DBMODE_FLAVOR_DEATH ) {
\t\t\ttxt lang("いたい…", cnvtalk("Ouch..."))
\t\t\treturn
\t\t}
\t\treturn
\t}
#global
"""


def test_end_to_end_records():
    records = DbParser().parse(DB_SOURCE)
    assert [r.id for r in records] == ["putit", "yeti", "little_sister"]

    putit = records[0]
    assert putit.name == ("プチ", "putit")
    assert putit.flavor_texts == {"calm": [("ぷよぷよ", "*wobble*"), ("ぷるぷる", "*quiver*")]}

    yeti = records[1]
    assert yeti.name == ("イエティ", "yeti")
    assert not yeti.has_flavor_texts()

    sister = records[2]
    assert sister.name == ()
    assert sister.flavor_texts == {
        "fov": [("おかえり、#onii！", "Welcome home, #onii!")],
        "dead": [("いたい…", "Ouch...")],
    }


def test_passive_and_set_blocks():
    source = "\n".join([
        "if ( dbid == CREATURE_ID_Foo ) {",
        "if ( dbmode == DBMODE_FLAVOR_PASSIVE ) {",
        'txt lang("A", "B")',
        "}",
        "if ( dbmode == DBMODE_SET ) {",
        'txt lang("Name_JP", "Name_EN")',
        "}",
        "}",
    ])
    records = DbParser().parse(source)
    assert len(records) == 1
    assert records[0].id == "foo"
    assert list(records[0].flavor_texts) == ["calm"]
    assert len(records[0].name) == 2


def test_duplicate_creature_keeps_later_block():
    source = "\n".join([
        "if ( dbid == CREATURE_ID_PUTIT ) {",
        "if ( dbmode == DBMODE_SET ) {",
        'txt lang("古い", "old")',
        "}",
        "if ( dbmode == DBMODE_FLAVOR_KILL ) {",
        'txt lang("古い", "old")',
        "}",
        "}",
        "if ( dbid == CREATURE_ID_PUTIT ) {",
        "if ( dbmode == DBMODE_SET ) {",
        'txt lang("新しい", "new")',
        "}",
        "}",
    ])
    records = DbParser().parse(source)
    assert len(records) == 1
    assert records[0].name == ("新しい", "new")
    assert records[0].flavor_texts == {}


def test_parse_is_repeatable():
    parser = DbParser()
    first = [r.to_dict() for r in parser.parse(DB_SOURCE)]
    second = [r.to_dict() for r in parser.parse(DB_SOURCE)]
    assert json.dumps(first, ensure_ascii=False) == json.dumps(second, ensure_ascii=False)


def test_thread_pool_keeps_order():
    config = ConfigManager(config_file=None)
    config.extraction_settings.parser_workers = 4
    assert DbParser(config).parse(DB_SOURCE) == DbParser().parse(DB_SOURCE)


def test_empty_source():
    assert DbParser().parse("") == []


def test_parse_file(tmp_path):
    path = tmp_path / "db_creature.hsp"
    path.write_text(DB_SOURCE, encoding="utf-8")
    records = DbParser().parse_file(path)
    assert [r.id for r in records] == ["putit", "yeti", "little_sister"]


def test_parse_file_missing(tmp_path):
    with pytest.raises(SourceReadError):
        DbParser().parse_file(tmp_path / "missing.hsp")
