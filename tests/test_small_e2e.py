import sys

import numpy as np

from pinfall.rules.fsm import BowlingRules
from pinfall.simulate import main, play_random_game, sample_pins


def test_e2e_random_policy_invariants():
    rng = np.random.default_rng(0)
    for _ in range(200):
        game = play_random_game(rng)
        assert game.is_complete
        assert 0 <= game.score() <= 300
        assert 11 <= len(game.throws) <= 21
        assert game.frame == 11


def test_random_states_never_go_negative():
    rng = np.random.default_rng(1)
    rules = BowlingRules()
    s = rules.initial_state()
    while not rules.is_complete(s):
        masks = rules.legal_actions(s)
        assert masks["pins"].any()
        s = rules.apply_roll(s, sample_pins(rng, masks["pins"]))
        assert 0 <= s.pins_left <= 10


def test_sample_pins_only_picks_legal_counts():
    rng = np.random.default_rng(2)
    mask = np.zeros(11, dtype=bool)
    mask[[0, 3]] = True
    picks = {sample_pins(rng, mask) for _ in range(50)}
    assert picks <= {0, 3}


def test_small_rules_game():
    rng = np.random.default_rng(3)
    game = play_random_game(rng, BowlingRules(pins=3, frames=2))
    assert game.is_complete
    assert 0 <= game.score() <= 18


def test_cli_flags_override_config(tmp_path, monkeypatch, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("seed: 99\nrules:\n  frames: 3\nsim:\n  n_games: 500\n")
    monkeypatch.setattr(sys, "argv", ["pinfall-sim", "--config", str(cfg),
                                      "--n_games", "20", "--seed", "1"])
    main()
    out = capsys.readouterr().out
    assert "GAMES: 20  SEED: 1" in out
    max_score = int(out.split("max=")[1].split()[0])
    assert 0 <= max_score <= 90


def test_cli_uses_config_when_no_flags(tmp_path, monkeypatch, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("seed: 5\nsim:\n  n_games: 4\n")
    monkeypatch.setattr(sys, "argv", ["pinfall-sim", "--config", str(cfg)])
    main()
    assert "GAMES: 4  SEED: 5" in capsys.readouterr().out
