from flavorsheet.core.block_splitter import normalize_creature_id, split_creature_blocks


def test_id_prefix_stripped_and_lowercased():
    blocks = split_creature_blocks('if (dbid == CREATURE_ID_Foo) {\n}\n')
    assert list(blocks) == ["foo"]


def test_whitespace_tolerant_marker():
    source = "if(dbid==CREATURE_ID_A){\n}\nif  (  dbid  ==  CREATURE_ID_B  )  {\n}"
    assert list(split_creature_blocks(source)) == ["a", "b"]


def test_block_spans_up_to_next_creature():
    source = (
        "#module db\n"
        "\tif ( dbid == CREATURE_ID_PUTIT ) {\n"
        "\t\treturn\n"
        "\t}\n"
        "\tif ( dbid == CREATURE_ID_YETI ) {\n"
        "\t\treturn\n"
        "\t}\n"
    )
    blocks = split_creature_blocks(source)
    assert blocks["putit"] == "if ( dbid == CREATURE_ID_PUTIT ) {\n\t\treturn\n\t}"
    assert blocks["yeti"] == "if ( dbid == CREATURE_ID_YETI ) {\n\t\treturn\n\t}"


def test_later_duplicate_replaces_earlier():
    source = (
        "if ( dbid == CREATURE_ID_PUTIT ) {\nfirst\n}\n"
        "if ( dbid == CREATURE_ID_YETI ) {\nyeti\n}\n"
        "if ( dbid == CREATURE_ID_PUTIT ) {\nsecond\n}\n"
    )
    blocks = split_creature_blocks(source)
    assert list(blocks) == ["putit", "yeti"]
    assert "second" in blocks["putit"]
    assert "first" not in blocks["putit"]


def test_no_creatures():
    assert split_creature_blocks("") == {}
    assert split_creature_blocks("if ( dbmode == DBMODE_SET ) {\n}") == {}


def test_normalize_creature_id():
    assert normalize_creature_id(" CREATURE_ID_Little_Sister ") == "little_sister"
    assert normalize_creature_id("PUTIT") == "putit"
