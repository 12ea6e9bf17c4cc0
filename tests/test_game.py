import random

import pytest

from wordlenet.game import (
    GameService,
    Reply,
    Tile,
    render_guess,
    render_win,
    score_guess,
    split_message,
)
from wordlenet.records import RecordStore
from wordlenet.words import DailyWord, WordList


@pytest.fixture
def service(tmp_path):
    words = WordList(["apple", "angle", "berry", "crane"])
    daily = DailyWord(words, clock=lambda: 0, rng=random.Random(1))
    daily.word = "apple"
    return GameService(RecordStore(tmp_path / "records"), daily)


@pytest.fixture
def player(service):
    password = "password"
    service.signup("alice", password)
    return "alice"


def test_score_exact_match_all_correct():
    assert score_guess("apple", "apple") == [Tile.CORRECT] * 5


def test_score_mixed():
    assert score_guess("paper", "apple") == [
        Tile.PRESENT,
        Tile.PRESENT,
        Tile.CORRECT,
        Tile.PRESENT,
        Tile.ABSENT,
    ]


def test_score_correct_positions_invariant():
    guess, answer = "angle", "apple"
    tiles = score_guess(guess, answer)
    for letter, expected, tile in zip(guess, answer, tiles):
        assert (tile is Tile.CORRECT) == (letter == expected)


def test_render_guess_absent_letters():
    assert render_guess("zzzzz", "apple") == "\033[30;30m z \033[0m" * 5


def test_render_guess_correct_letter_uses_green():
    line = render_guess("angle", "apple")
    assert line.startswith("\033[30;42m a \033[0m")


def test_render_win():
    assert render_win("apple") == "\033[30;42m a  p  p  l  e \033[0m"


def test_split_message_bytes():
    assert split_message(b"guess<<apple") == ["guess", "apple"]


def test_split_message_stops_at_nul():
    assert split_message(b"play\x00junk") == ["play"]


def test_split_message_collapses_delimiters():
    assert split_message("a<<<<b<<") == ["a", "b"]
    assert split_message("") == []


def test_reply_encode_forms():
    assert Reply("win", "x").encode() == b"win<<x"
    assert Reply(None, "body").encode() == b"body"
    assert Reply("accept").encode() == b"accept"


def test_signup_twice(service):
    password = "password"
    assert "user registered" in service.signup("bob", password).body
    assert "already exists" in service.signup("bob", password).body


def test_login_results(service, player):
    password = "password"
    assert service.login(player, password).kind == "accept"
    assert service.login(player, "wrong").body == "password does not match"
    assert service.login("nobody", password).body == "user does not exists"


def test_play_new_game_counts_once(service, player):
    reply = service.play(player)
    assert reply == Reply("ok", "Attempts left: 6")
    service.play(player)
    assert service.store.get_stats(player).total_game == 1


def test_guess_invalid_word(service, player):
    service.play(player)
    reply = service.guess(player, "zzzzz")
    assert reply.kind == "error"
    assert reply.body.startswith("You must input a valid word")


def test_guess_wrong_word(service, player):
    service.play(player)
    reply = service.guess(player, "crane")
    line = render_guess("crane", "apple")
    assert reply == Reply("skip", f"Attempts left: 5\n\n{line}\n")


def test_play_resumes_with_history(service, player):
    service.play(player)
    service.guess(player, "crane")
    reply = service.play(player)
    assert reply.kind == "ok"
    assert reply.body.startswith("Attempts left: 5\n\n")
    assert render_guess("crane", "apple") in reply.body


def test_guess_win_updates_stats(service, player):
    service.play(player)
    reply = service.guess(player, "apple")
    assert reply == Reply("win", render_win("apple") + "\n")
    stats = service.store.get_stats(player)
    assert (stats.total_win, stats.current_win_streak, stats.win_streak) == (1, 1, 1)
    after = service.play(player)
    assert after.kind == "ko"
    assert "Word already found, " in after.body
    assert after.body.endswith("wait tomorrow for the next word!")


def test_six_wrong_guesses_end_game(service, player):
    service.play(player)
    replies = [service.guess(player, "crane") for _ in range(6)]
    assert [r.kind for r in replies] == ["skip"] * 5 + ["end"]
    assert replies[-1].body.count("\n") == 6
    after = service.play(player)
    assert after.kind == "ko"
    assert "You have no more attempts for today, " in after.body
    assert service.store.get_stats(player).current_win_streak == 0


def test_stats_before_any_game(service, player):
    body = service.stats(player).body
    assert body.startswith("total game: 0\ntotal win: 0\n")
    assert body.endswith("win ratio: 0.000000%")


def test_stats_after_win(service, player):
    service.play(player)
    service.guess(player, "apple")
    body = service.stats(player).body
    assert "total game: 1\ntotal win: 1\n" in body
    assert body.endswith("win ratio: 100.000000%")