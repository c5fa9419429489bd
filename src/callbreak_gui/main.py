"""
Call Break GUI entrypoint.

One window: scoreboard and round info at the top, the three computer seats,
the cards on the table, and the human hand as a row of buttons (only legal
cards are enabled). Computer turns are paced by a single-shot QTimer; starting
a new round stops it, which abandons whatever was in flight.
"""
from __future__ import annotations

import random
from typing import Optional, Sequence

from PySide6 import QtCore, QtWidgets

from callbreak.config import GameConfig
from callbreak.deck import Card, Suit, sort_hand
from callbreak.game import GameListener, Phase, RoundEngine
from callbreak.persistence import StateStore

from .store import QSettingsStore
from .themes import DARK, LIGHT, apply_theme, get_saved_theme, save_theme


class _WindowListener(GameListener):
    """Forwards engine notifications to the window."""

    def __init__(self, window: "MainWindow") -> None:
        self._window = window

    def bid_set(self, seat_id: int, bid: int) -> None:
        self._window._refresh_seats()

    def trick_resolved(self, winner: int, card: Card) -> None:
        self._window._set_status(f"{self._window.engine.seats[winner].name} won the trick with {card}.")
        self._window._trick_just_resolved = True

    def round_finished(self, scores: Sequence[int], deltas: Sequence[int]) -> None:
        parts = ", ".join(f"P{i}: {d:+d}" for i, d in enumerate(deltas))
        self._window._set_status(f"Round over ({parts}). Press Next Round to continue.")


class MainWindow(QtWidgets.QMainWindow):
    def __init__(
        self,
        config: GameConfig | None = None,
        store: StateStore | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Call Break")
        self.resize(960, 640)

        self.config = config or GameConfig()
        self.engine = RoundEngine(
            config=self.config,
            store=store if store is not None else QSettingsStore(self.config.storage_key),
            rng=rng,
        )
        self.engine.add_listener(_WindowListener(self))
        self._trick_just_resolved = False
        self._hand_buttons: list[tuple[Card, QtWidgets.QPushButton]] = []

        self._timer = QtCore.QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_computer_turn)

        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)
        layout.addLayout(self._make_header())
        layout.addWidget(self._make_seats_group())
        layout.addWidget(self._make_table_group(), 1)
        layout.addWidget(self._make_hand_group())
        layout.addLayout(self._make_controls())
        self._label_status = QtWidgets.QLabel("")
        layout.addWidget(self._label_status)
        self.setCentralWidget(central)

        self.start_round()

    # ---- Layout ----

    def _make_header(self) -> QtWidgets.QHBoxLayout:
        row = QtWidgets.QHBoxLayout()
        self._label_round = QtWidgets.QLabel("")
        row.addWidget(self._label_round)
        row.addStretch(1)
        self._label_scores = QtWidgets.QLabel("")
        row.addWidget(self._label_scores)
        row.addStretch(1)
        row.addWidget(QtWidgets.QLabel("Theme:"))
        self._combo_theme = QtWidgets.QComboBox()
        self._combo_theme.addItems(["Dark", "Light"])
        self._combo_theme.setCurrentIndex(0 if get_saved_theme() == DARK else 1)
        self._combo_theme.currentTextChanged.connect(self._on_theme_changed)
        row.addWidget(self._combo_theme)
        return row

    def _make_seats_group(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("Players")
        row = QtWidgets.QHBoxLayout(group)
        self._seat_labels: dict[int, QtWidgets.QLabel] = {}
        for seat in self.engine.seats:
            label = QtWidgets.QLabel("")
            label.setAlignment(QtCore.Qt.AlignCenter)
            self._seat_labels[seat.id] = label
            row.addWidget(label)
        return group

    def _make_table_group(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("Table")
        layout = QtWidgets.QVBoxLayout(group)
        self._label_table = QtWidgets.QLabel("")
        self._label_table.setAlignment(QtCore.Qt.AlignCenter)
        font = self._label_table.font()
        font.setPointSize(font.pointSize() + 6)
        self._label_table.setFont(font)
        layout.addWidget(self._label_table)
        return group

    def _make_hand_group(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("Your hand")
        self._hand_layout = QtWidgets.QHBoxLayout(group)
        return group

    def _make_controls(self) -> QtWidgets.QHBoxLayout:
        row = QtWidgets.QHBoxLayout()
        row.addWidget(QtWidgets.QLabel("Bid:"))
        self._spin_bid = QtWidgets.QSpinBox()
        self._spin_bid.setRange(0, 13)
        row.addWidget(self._spin_bid)
        self._btn_submit_bid = QtWidgets.QPushButton("Submit Bid")
        self._btn_submit_bid.clicked.connect(self._on_submit_bid)
        row.addWidget(self._btn_submit_bid)
        row.addStretch(1)
        self._btn_next_round = QtWidgets.QPushButton("Next Round")
        self._btn_next_round.clicked.connect(self.start_round)
        row.addWidget(self._btn_next_round)
        self._btn_reset = QtWidgets.QPushButton("Reset History")
        self._btn_reset.clicked.connect(self._on_reset_history)
        row.addWidget(self._btn_reset)
        return row

    # ---- Flow ----

    def start_round(self) -> None:
        self._timer.stop()
        self._trick_just_resolved = False
        self.engine.start_round()
        self._set_status("Choose your bid.")
        self._refresh_all()
        self._schedule_computer_turn()

    def _on_reset_history(self) -> None:
        self._timer.stop()
        self.engine.reset_match()
        self._set_status("History cleared. Choose your bid.")
        self._refresh_all()
        self._schedule_computer_turn()

    def _on_submit_bid(self) -> None:
        if not self.engine.submit_bid(self._spin_bid.value()):
            return
        self._set_status("")
        self._refresh_all()
        self._schedule_computer_turn()

    def _on_card_clicked(self, card: Card) -> None:
        if not self.engine.select_card(card):
            return
        self._refresh_all()
        self._schedule_computer_turn()

    def _schedule_computer_turn(self) -> None:
        """Queue the next computer play, or settle the controls if none is due."""
        if self.engine.phase != Phase.PLAYING or self.engine.awaiting_human():
            self._refresh_controls()
            return
        delay = self.config.decision_delay_ms
        if self._trick_just_resolved:
            delay += self.config.trick_pause_ms
        if delay <= 0:
            self.engine.advance()
            self._trick_just_resolved = False
            self._refresh_all()
            return
        self._timer.start(delay)

    def _on_computer_turn(self) -> None:
        self._trick_just_resolved = False
        self.engine.step()
        self._refresh_all()
        self._schedule_computer_turn()

    # ---- Rendering ----

    def _refresh_all(self) -> None:
        self._refresh_header()
        self._refresh_seats()
        self._refresh_table()
        self._refresh_hand()
        self._refresh_controls()

    def _refresh_header(self) -> None:
        trump = self.engine.trump
        trump_text = f"{trump.symbol} {trump.name.title()}" if trump is not None else "none"
        self._label_round.setText(
            f"Round {self.engine.round_number}, Dealer: Player {self.engine.dealer}, Trump: {trump_text}"
        )
        self._label_scores.setText(
            "   ".join(f"{s.name}: {s.score}" for s in self.engine.seats)
        )

    def _refresh_seats(self) -> None:
        bidding = self.engine.phase == Phase.BIDDING
        for seat in self.engine.seats:
            bid = "?" if bidding and seat is self.engine.human else str(seat.bid)
            marker = "▶ " if self.engine.current_seat() == seat.id else ""
            self._seat_labels[seat.id].setText(
                f"{marker}{seat.name}\nBid: {bid}   Tricks: {seat.tricks_won}\nCards: {len(seat.hand)}"
            )

    def _refresh_table(self) -> None:
        trick = self.engine.current_trick or self.engine.last_trick
        self._label_table.setText(
            "    ".join(f"{self.engine.seats[s].name}: {c}" for s, c in trick)
        )

    def _refresh_hand(self) -> None:
        while self._hand_layout.count():
            item = self._hand_layout.takeAt(0)
            w = item.widget()
            if w is not None:
                w.deleteLater()
        self._hand_buttons = []
        human = self.engine.human
        if human is None:
            return
        my_turn = self.engine.phase == Phase.PLAYING and self.engine.awaiting_human()
        for card in sort_hand(human.hand):
            btn = QtWidgets.QPushButton(str(card))
            btn.setProperty("card", True)
            btn.setProperty("red", card.suit in (Suit.HEARTS, Suit.DIAMONDS))
            btn.setEnabled(my_turn and self.engine.is_legal(card))
            btn.clicked.connect(lambda _checked=False, c=card: self._on_card_clicked(c))
            self._hand_layout.addWidget(btn)
            self._hand_buttons.append((card, btn))
        self._hand_layout.addStretch(1)

    def _refresh_controls(self) -> None:
        bidding = self.engine.phase == Phase.BIDDING
        self._spin_bid.setEnabled(bidding)
        self._btn_submit_bid.setEnabled(bidding)
        self._btn_next_round.setEnabled(self.engine.phase == Phase.COMPLETE)

    def _set_status(self, text: str) -> None:
        self._label_status.setText(text)

    def _on_theme_changed(self, text: str) -> None:
        theme = DARK if text.lower() == "dark" else LIGHT
        save_theme(theme)
        app = QtWidgets.QApplication.instance()
        if app:
            apply_theme(app, theme)


def main(argv: Optional[list[str]] = None) -> None:
    import sys

    app = QtWidgets.QApplication(argv or sys.argv)
    apply_theme(app, get_saved_theme())
    win = MainWindow()
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
