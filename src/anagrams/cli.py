"""
Command line entry point for printing anagrams.

Entry point: anagrams
"""
import logging
from pathlib import Path

import click

from ._errors import AnagramError
from ._text import split_all


def _open_solver(words_file, data_dir):
    import anagrams

    if words_file is not None and data_dir is not None:
        raise click.UsageError("Use either --words or --data-dir, not both.")
    if words_file is not None:
        return anagrams.load_word_list(words_file)
    return anagrams.load(data_dir)


_dictionary_options = [
    click.option("--words", "words_file", type=click.Path(path_type=Path), default=None,
                 help="Plain-text word list, one word per line."),
    click.option("--data-dir", type=click.Path(path_type=Path), default=None,
                 help="Compiled dictionary directory (default: bundled data)."),
]


def dictionary_options(func):
    for option in reversed(_dictionary_options):
        func = option(func)
    return func


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log dictionary loading and search progress.")
def cli(verbose):
    """Find word and sentence anagrams in a dictionary."""
    if verbose:
        logging.basicConfig(level=logging.INFO)


@cli.command()
@click.argument("words", nargs=-1, required=True)
@click.option("--limit", type=int, default=None,
              help="Print at most this many sentences.")
@dictionary_options
def sentence(words, limit, words_file, data_dir):
    """Print every anagram sentence of WORDS."""
    try:
        solver = _open_solver(words_file, data_dir)
    except AnagramError as e:
        raise click.ClickException(str(e)) from e

    results = sorted(" ".join(s) for s in solver.sentence_anagrams(split_all(words)))
    if limit is not None:
        results = results[:limit]
    for line in results:
        click.echo(line)


@cli.command()
@click.argument("word")
@dictionary_options
def word(word, words_file, data_dir):
    """Print the dictionary anagrams of WORD."""
    try:
        solver = _open_solver(words_file, data_dir)
    except AnagramError as e:
        raise click.ClickException(str(e)) from e

    for w in sorted(solver.word_anagrams(word)):
        click.echo(w)


@cli.command("compile")
@click.argument("wordlist", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out_dir", type=click.Path(file_okay=False, path_type=Path))
@click.option("--name", default=None, help="Dictionary name stored in the manifest.")
def compile_cmd(wordlist, out_dir, name):
    """Compile WORDLIST into a dictionary data directory OUT_DIR."""
    from ._loader import read_word_list, write_data

    try:
        words = read_word_list(wordlist)
    except AnagramError as e:
        raise click.ClickException(str(e)) from e
    write_data(words, out_dir, name=name or wordlist.stem)
    click.echo(f"Wrote {len(words)} words to {out_dir}")
