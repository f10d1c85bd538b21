from dll import ListStore, MarkerSet, NodeStatus
from ui import history_panel, layout, pseudocode_viewer, render_canvas, status_panel


def snapshot(store, markers):
    data = store.to_dict()
    data.update({"order": store.order(), "markers": markers.as_dict()})
    return data


def test_renders_nodes_links_and_markers():
    store = ListStore.from_values([10, 20, 30])
    markers = MarkerSet(head=0, tail=2)
    svg = render_canvas(snapshot(store, markers))
    assert svg.startswith("<svg")
    assert svg.count('class="node ') == 3
    assert svg.count("link-next") == 2
    assert svg.count("link-prev") == 2
    assert ">head<" in svg and ">tail<" in svg
    assert svg.count(">null<") == 2


def test_empty_list():
    svg = render_canvas(snapshot(ListStore(), MarkerSet()))
    assert "empty list" in svg


def test_detached_node_goes_on_second_row():
    store = ListStore.from_values([10, 20])
    store.append(store.create_node(99))
    positions = layout(3, store.order())
    assert positions[0][1] == positions[1][1]
    assert positions[2][1] > positions[0][1]

    svg = render_canvas(snapshot(store, MarkerSet(new_node=2)))
    assert "status-newNode" in svg
    assert ">new<" in svg


def test_fade_out_is_translucent():
    store = ListStore.from_values([10])
    store.set_statuses({0: NodeStatus.FADE_OUT})
    svg = render_canvas(snapshot(store, MarkerSet()))
    assert 'opacity="0.25"' in svg


def test_panels_escape_text():
    html = status_panel(message="<b>x</b>")
    assert "&lt;b&gt;" in html
    code = pseudocode_viewer(["a < b"], current_line=0)
    assert "a &lt; b" in code
    assert "highlight" in code


def test_history_panel():
    assert "No operations yet" in history_panel([])
    html = history_panel([
        {"type": "insert_position", "value": 5, "position": 2},
        {"type": "delete_head", "value": 10},
    ])
    assert "Insert @2 → 5" in html
    assert "Delete Head 10" in html
