from recipe_keeper.app.services.url_parsing import json_ld


def test_load_json_block_strict():
    assert json_ld.load_json_block('{"@type": "Recipe", "name": "X"}') == {"@type": "Recipe", "name": "X"}


def test_load_json_block_recovers_trailing_comma():
    data = json_ld.load_json_block('{"@type":"Recipe","name":"X",}')
    assert data == {"@type": "Recipe", "name": "X"}


def test_load_json_block_recovers_trailing_comma_in_array():
    data = json_ld.load_json_block('{"recipeIngredient": ["1 egg", "salt",\n  ],}')
    assert data == {"recipeIngredient": ["1 egg", "salt"]}


def test_load_json_block_recovers_control_characters():
    raw = '{"@type": "Recipe", "name": "Bad\x08 Cake", "description": "line one\nline two"}'
    data = json_ld.load_json_block(raw)
    assert data["name"] == "Bad Cake"
    assert data["description"] == "line one\nline two"


def test_load_json_block_returns_none_for_garbage():
    assert json_ld.load_json_block("{not json at all") is None


def test_sanitize_json():
    assert json_ld.sanitize_json('[1, 2, ]\x01') == "[1, 2]"


def test_flatten_json_is_depth_first_parent_first():
    data = {"@type": "A", "child": {"@type": "B", "items": [{"@type": "C"}]}, "other": {"@type": "D"}}
    assert [node["@type"] for node in json_ld.flatten_json(data)] == ["A", "B", "C", "D"]


def test_flatten_json_ignores_scalars():
    assert json_ld.flatten_json("text") == []
    assert json_ld.flatten_json([1, None, "x"]) == []


def test_find_recipe_node_in_graph():
    block = '{"@graph":[{"@type":"BreadcrumbList"},{"@type":"Recipe","name":"Y"}]}'
    node = json_ld.find_recipe_node([block])
    assert node is not None
    assert node["name"] == "Y"


def test_find_recipe_node_with_type_list():
    block = '[{"@type": "WebPage"}, {"@type": ["Recipe", "NewsArticle"], "name": "Z"}]'
    assert json_ld.find_recipe_node([block])["name"] == "Z"


def test_find_recipe_node_matches_type_literally():
    assert json_ld.find_recipe_node(['{"@type": "recipe", "name": "lower"}']) is None


def test_find_recipe_node_skips_malformed_blocks():
    blocks = ["{broken", '{"@type": "Organization"}', '{"@type": "Recipe", "name": "Found"}']
    assert json_ld.find_recipe_node(blocks)["name"] == "Found"


def test_find_recipe_node_first_match_wins():
    blocks = ['{"@type": "Recipe", "name": "First"}', '{"@type": "Recipe", "name": "Second"}']
    assert json_ld.find_recipe_node(blocks)["name"] == "First"


def test_find_json_ld_blocks(soup_from):
    soup = soup_from(
        """
        <html><head>
          <script type="application/ld+json">{"@type": "WebSite"}</script>
          <script type="application/ld+json">   </script>
          <script type="text/javascript">var x = 1;</script>
          <script type="application/ld+json">{"@type": "Recipe"}</script>
        </head></html>
        """
    )
    blocks = json_ld.find_json_ld_blocks(soup)
    assert [b.strip() for b in blocks] == ['{"@type": "WebSite"}', '{"@type": "Recipe"}']


def test_find_recipe_node_skips_deeply_nested_block():
    deep = "[" * 5000 + "]" * 5000
    good = '{"@type": "Recipe", "name": "Good", "recipeIngredient": ["1 egg"]}'
    assert json_ld.load_json_block(deep) is None
    assert json_ld.find_recipe_node([deep, good])["name"] == "Good"


def test_find_recipe_node_skips_block_too_deep_to_flatten(monkeypatch):
    deep = []
    for _ in range(5000):
        deep = [deep]
    parsed = {"deep": deep, "good": {"@type": "Recipe", "name": "Good"}}

    monkeypatch.setattr(json_ld, "load_json_block", lambda raw: parsed[raw])
    assert json_ld.find_recipe_node(["deep", "good"])["name"] == "Good"
