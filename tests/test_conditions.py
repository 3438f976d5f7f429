import threading
import time

from gosyncdemos.conditions import (
    BankAccount,
    GameLobby,
    spendy,
    stingy,
    writer_preference_main,
)


def _wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            return False
        time.sleep(0.01)
    return True


def test_saver_and_spender_balance_out(capsys):
    account = BankAccount(100)
    threads = [
        threading.Thread(target=stingy, args=(account, 5)),
        threading.Thread(target=spendy, args=(account, 3)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(5)
    assert account.balance == 0
    out = capsys.readouterr().out
    assert "Stingy done" in out
    assert "Spendy done" in out


def test_spender_waits_for_deposits():
    account = BankAccount(0)
    spender = threading.Thread(target=spendy, args=(account, 1), daemon=True)
    spender.start()
    spender.join(0.1)
    assert spender.is_alive()
    stingy(account, 5)
    spender.join(5)
    assert not spender.is_alive()
    assert account.balance == 0


def test_deposit_and_withdraw_keep_balance():
    account = BankAccount(30)
    account.deposit(40)
    account.withdraw(50)
    assert account.balance == 20


def test_lobby_releases_everyone_when_all_join(capsys):
    lobby = GameLobby(3)
    results = {}

    def play(player_id):
        results[player_id] = lobby.join(player_id)

    threads = [threading.Thread(target=play, args=(i,)) for i in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(5)
    assert results == {0: True, 1: True, 2: True}
    assert lobby.remaining == 0
    assert lobby.started is False
    out = capsys.readouterr().out
    assert "All players are connected. Ready player 2" in out


def test_lobby_expiry_starts_game_early(capsys):
    lobby = GameLobby(3)
    results = []
    player = threading.Thread(target=lambda: results.append(lobby.join(0)))
    player.start()
    assert _wait_until(lambda: lobby.remaining == 2)
    lobby.expire()
    player.join(5)
    assert results == [False]
    assert lobby.started is True
    out = capsys.readouterr().out
    assert "0 : Connected" in out
    assert "time's up! Starting game!" in out
    assert "Game has started:  0" in out


def test_join_after_start_does_not_count():
    lobby = GameLobby(2)
    lobby.expire()
    assert lobby.join(5) is False
    assert lobby.remaining == 2


def test_writer_preference_main_lets_writer_in(capsys):
    writer_preference_main()
    lines = capsys.readouterr().out.splitlines()
    assert "write finished" in lines
    assert lines.index("read done") < lines.index("write finished")