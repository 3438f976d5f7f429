"""Condition-variable demos: a shared bank account, a game lobby, writer preference."""

import threading
import time

from .rwmutex import ReadWriteMutex

_SPEND_THRESHOLD = 50


class BankAccount:
    """A balance shared between depositing and withdrawing threads."""

    def __init__(self, money):
        self._money = money
        self._cond = threading.Condition()

    @property
    def balance(self):
        """Money currently in the account."""
        with self._cond:
            return self._money

    def deposit(self, amount):
        """Add ``amount``; wake a waiting spender once the balance allows it."""
        with self._cond:
            self._money += amount
            if self._money >= _SPEND_THRESHOLD:
                self._cond.notify()

    def withdraw(self, amount):
        """Take ``amount`` out, waiting until the balance covers it."""
        with self._cond:
            self._cond.wait_for(lambda: self._money >= amount)
            self._money -= amount
            if self._money < 0:
                raise RuntimeError("Money is negative")


def stingy(account, times=1_000_000):
    """Deposit 10 into ``account`` ``times`` times."""
    for _ in range(times):
        account.deposit(10)
    print("Stingy done")


def spendy(account, times=2_000_000):
    """Withdraw 50 from ``account`` ``times`` times, waiting for funds."""
    for _ in range(times):
        account.withdraw(_SPEND_THRESHOLD)
    print("Spendy done")


def bank_main():
    """Let a saver and a spender share an account for two seconds."""
    account = BankAccount(100)
    for worker in (stingy, spendy):
        threading.Thread(target=worker, args=(account,), daemon=True).start()
    time.sleep(2)
    balance = account.balance
    print(f"money in bank account:  {balance}")
    return balance


class GameLobby:
    """Players wait here until all have joined or the game is started early."""

    def __init__(self, players):
        self._remaining = players
        self._started = False
        self._cond = threading.Condition()

    @property
    def remaining(self):
        """Players still expected to join."""
        with self._cond:
            return self._remaining

    @property
    def started(self):
        """Whether the game was started before everyone joined."""
        with self._cond:
            return self._started

    def join(self, player_id):
        """Join and wait; True if all players joined, False if started early."""
        with self._cond:
            if not self._started:
                print(f"{player_id} : Connected")
                self._remaining -= 1
            if self._remaining == 0:
                self._cond.notify_all()
            while self._remaining > 0 and not self._started:
                print(f"{player_id} : Waiting for more players")
                self._cond.wait()
            started = self._started
        if started:
            print(f"Game has started:  {player_id}")
            return False
        print(f"All players are connected. Ready player {player_id}")
        return True

    def expire(self):
        """Start the game now and release every waiting player."""
        with self._cond:
            print("time's up! Starting game!")
            self._started = True
            self._cond.notify_all()


def _connect_players(lobby, players):
    threads = []
    for player_id in range(players):
        thread = threading.Thread(target=lobby.join, args=(player_id,))
        thread.start()
        threads.append(thread)
        time.sleep(1)
    for thread in threads:
        thread.join()


def game_sync_main():
    """Four players join a second apart and wait for each other."""
    _connect_players(GameLobby(4), 4)


def game_timeout_main():
    """Players join late; a timer starts the game before all have arrived."""
    lobby = GameLobby(4)
    timer = threading.Timer(3.2, lobby.expire)
    timer.start()
    time.sleep(2)
    _connect_players(lobby, 4)
    timer.join()


def writer_preference_main():
    """Two busy readers cannot starve a writer that asks for the lock."""
    mutex = ReadWriteMutex()
    stop = threading.Event()

    def reader():
        while True:
            mutex.read_lock()
            if stop.is_set():
                mutex.read_unlock()
                return
            time.sleep(1)
            print("read done")
            mutex.read_unlock()

    readers = [threading.Thread(target=reader) for _ in range(2)]
    for thread in readers:
        thread.start()
    time.sleep(1)
    mutex.write_lock()
    print("write finished")
    stop.set()
    mutex.write_unlock()
    for thread in readers:
        thread.join()