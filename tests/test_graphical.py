import pytest

from zappy.commands import GraphArgs
from zappy.context import Context, Player
from zappy.elements import Element
from zappy.graphical import (
    GraphArgsError,
    graphic_actions,
    handle_line,
    match_command,
    parse_graph_args,
)
from zappy.world import GameMap, Position


@pytest.fixture
def ctxt():
    context = Context()
    context.game_map = GameMap(10, 12)
    context.server.clients.append(Player(id=0, team="GRAPHIC"))
    context.server.clients.append(Player(id=7, team="red", pos=Position(2, 3), level=3))
    return context


@pytest.fixture
def gui(ctxt):
    return ctxt.server.clients[0]


def test_match_command_without_args():
    assert match_command("msz") == ("msz", None)


def test_match_command_ignores_case():
    assert match_command("MsZ") == ("msz", None)
    assert match_command("BCT 1 2") == ("bct ", "1 2")


def test_match_command_with_args():
    assert match_command("ppo #4") == ("ppo ", "#4")


def test_match_command_rejects_missing_args_and_unknown():
    assert match_command("bct ") is None
    assert match_command("bct") is None
    assert match_command("msz extra") is None
    assert match_command("hello") is None


def test_parse_bct_args():
    args = parse_graph_args("3 4", "bct ")
    assert (args.ssize_a, args.ssize_b, args.nargs, args.is_signed) == (3, 4, 2, True)


def test_parse_bct_second_may_be_negative():
    assert parse_graph_args("3 -2", "bct ").ssize_b == -2


def test_parse_bct_empty_second_reads_zero():
    assert parse_graph_args("3 ", "bct ").ssize_b == 0


@pytest.mark.parametrize("text", ["-1 4", "3", "3 x", "a 4", "3 4x", "3,4"])
def test_parse_bct_errors(text):
    with pytest.raises(GraphArgsError):
        parse_graph_args(text, "bct ")


def test_parse_bct_overflow():
    with pytest.raises(GraphArgsError):
        parse_graph_args("99999999999999999999 1", "bct ")


@pytest.mark.parametrize("command", ["ppo ", "plv ", "pin "])
def test_parse_id(command):
    args = parse_graph_args("#5", command)
    assert (args.ssize_a, args.nargs, args.is_signed) == (5, 1, True)


@pytest.mark.parametrize("text", ["5", "#", "#5x", "#x"])
def test_parse_id_errors(text):
    with pytest.raises(GraphArgsError):
        parse_graph_args(text, "ppo ")


def test_parse_sst():
    args = parse_graph_args("100", "sst ")
    assert (args.size_a, args.nargs, args.is_signed) == (100, 1, False)


def test_parse_sst_negative_wraps():
    assert parse_graph_args("-1", "sst ").size_a == 2**64 - 1


@pytest.mark.parametrize("text", ["abc", "10x", "99999999999999999999999"])
def test_parse_sst_errors(text):
    with pytest.raises(GraphArgsError):
        parse_graph_args(text, "sst ")


def test_parse_args_of_plain_command_is_empty():
    assert parse_graph_args("anything", "msz") == GraphArgs()


def test_handle_line_unknown(ctxt, gui):
    handle_line(ctxt, gui, "nope")
    assert gui.outbox == ["suc\n"]


def test_handle_line_msz(ctxt, gui):
    handle_line(ctxt, gui, "msz")
    assert gui.outbox == ["msz 10 12\n"]


def test_handle_line_bct(ctxt, gui):
    ctxt.game_map.tile(1, 2).append(Element.FOOD)
    handle_line(ctxt, gui, "bct 1 2")
    assert gui.outbox == ["bct 1 2 1 0 0 0 0 0 0\n"]


def test_handle_line_bad_args_replies_sbp(ctxt, gui):
    handle_line(ctxt, gui, "bct a b")
    assert gui.outbox == ["sbp\n"]


def test_handle_line_unknown_player(ctxt, gui):
    handle_line(ctxt, gui, "plv #99")
    assert gui.outbox == ["sbp\n"]


def test_handle_line_plv(ctxt, gui):
    handle_line(ctxt, gui, "plv #7")
    assert gui.outbox == ["plv #7 3\n"]


def test_handle_line_sst(ctxt, gui):
    handle_line(ctxt, gui, "sst 50")
    assert ctxt.server.frequency == 5000
    assert gui.outbox == ["sst 50\n"]


def test_handle_line_sst_zero(ctxt, gui):
    handle_line(ctxt, gui, "sst 0")
    assert gui.outbox == ["sbp\n"]
    assert ctxt.server.frequency == 10000


def test_graphic_actions_processes_all_lines(ctxt, gui):
    gui.buffer = "msz\n\nsgt\n"
    graphic_actions(ctxt, gui)
    assert gui.outbox == ["msz 10 12\n", "sgt 100\n"]
    assert gui.buffer == ""


def test_graphic_actions_handles_trailing_partial_line(ctxt, gui):
    gui.buffer = "tna\nmsz"
    ctxt.teams.clear()
    graphic_actions(ctxt, gui)
    assert gui.outbox == ["msz 10 12\n"]
    assert gui.buffer == ""


def test_graphic_actions_empty_buffer(ctxt, gui):
    graphic_actions(ctxt, gui)
    assert gui.outbox == []
    assert gui.buffer == ""