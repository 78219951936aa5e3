# main.py
import sys, os
sys.path.append(os.path.dirname(__file__))  # 確保能找到 config.py

import argparse
import logging
from logging.handlers import RotatingFileHandler

from utils.crashlog import setup_crashlog, set_context, log_exception, log_dir
from config import AppConfig, SynthConfig, OutputConfig
from notes.score import DEFAULT_MELODY, build_score, load_score_json, save_score_json
from midi.parser import parse_midi_to_score
from audio.sequence import compose_sequence
from audio.pcm import save_pcm

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def _init_logging(verbose: bool = False):
    if logging.getLogger().handlers:
        if verbose:
            logging.getLogger().setLevel(logging.DEBUG)
        return

    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)
    try:
        fh = RotatingFileHandler(os.path.join(log_dir(), "app.log"),
                                 maxBytes=2*1024*1024, backupCount=3, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(fh)
    except OSError:
        logging.warning("app.log unavailable, logging to stderr only", exc_info=True)

def build_parser() -> argparse.ArgumentParser:
    d = SynthConfig()
    ap = argparse.ArgumentParser(description="Render a monophonic melody to raw little-endian float64 PCM.")
    ap.add_argument('--out', default=OutputConfig().path, help="output .pcm path (overwritten)")
    ap.add_argument('--bpm', type=int, default=d.bpm)
    ap.add_argument('--volume', type=float, default=d.volume)
    ap.add_argument('--sample-rate', type=int, default=d.sample_rate)
    src = ap.add_mutually_exclusive_group()
    src.add_argument('--score', help="JSON score: [{\"note\": \"D\", \"beats\": 0.5}, ...]")
    src.add_argument('--midi', help="MIDI file, reduced to its top line")
    ap.add_argument('--dump-score', help="also write the named score as JSON")
    ap.add_argument('-v', '--verbose', action='store_true')
    return ap

def run(cfg: AppConfig, score_path=None, midi_path=None, dump_path=None):
    cfg.synth.validate()
    if midi_path:
        score = parse_midi_to_score(midi_path, cfg.synth.volume)
    else:
        pairs = load_score_json(score_path) if score_path else DEFAULT_MELODY
        score = build_score(pairs, cfg.synth.volume)
        if dump_path:
            save_score_json(pairs, dump_path)
    wave = compose_sequence(score, cfg.synth.sample_rate, cfg.synth.bpm)
    save_pcm(wave, cfg.output.path)
    return wave

def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.midi and args.dump_score:
        ap.error("--dump-score only applies to named scores, not --midi")

    _init_logging(args.verbose)
    cfg = AppConfig(
        synth=SynthConfig(sample_rate=args.sample_rate, bpm=args.bpm, volume=args.volume),
        output=OutputConfig(path=args.out),
    )
    set_context(out=cfg.output.path, score=args.score, midi=args.midi,
                bpm=cfg.synth.bpm, sample_rate=cfg.synth.sample_rate)
    logging.info("Rendering at %d Hz, %d bpm, volume %.2f -> %s",
                 cfg.synth.sample_rate, cfg.synth.bpm, cfg.synth.volume, cfg.output.path)
    try:
        run(cfg, score_path=args.score, midi_path=args.midi, dump_path=args.dump_score)
    except (ValueError, OSError) as e:  # InvalidNoteName is a ValueError
        logging.error("Synthesis aborted: %s", e, exc_info=True)
        try:
            log_exception("main", e)
        except OSError:
            pass
        print(f"Error: {e} (see logs/ for details)", file=sys.stderr)
        return 1
    return 0

def cli():
    setup_crashlog()
    sys.exit(main())

if __name__ == "__main__":
    cli()
