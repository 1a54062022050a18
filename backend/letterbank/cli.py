import click
from config import Config
from letterbank import create_app, open_command_channel
from letterbank.runner import configure_logging, play
from letterbank.services.game import WordSet


@click.command('letterbank')
@click.option('--host', default=None, help='Interface the viewer listener binds to.')
@click.option('--port', type=int, default=None, help='Port for viewer commands.')
@click.option('--dictionary', 'dictionary_path', type=click.Path(), default=None,
              help='Word list, one word per line.')
@click.option('--bank-size', type=click.IntRange(min=1), default=None, help='Letters kept in the bank.')
@click.option('--unscored', is_flag=True, help='Every letter is worth zero points.')
@click.option('--log-file', type=click.Path(dir_okay=False), default=None)
def main(host, port, dictionary_path, bank_size, unscored, log_file):
    """Form words from your letter bank while viewers swap letters over HTTP."""
    command_tx, command_rx = open_command_channel()
    app = create_app(Config, command_sender=command_tx)

    overrides = {
        'LISTEN_HOST': host,
        'LISTEN_PORT': port,
        'DICTIONARY_PATH': dictionary_path,
        'BANK_SIZE': bank_size,
        'LOG_FILE': log_file,
    }
    app.config.update({k: v for k, v in overrides.items() if v is not None})
    if unscored:
        app.config['SCORED_LETTERS'] = False

    configure_logging(app.config)

    try:
        dictionary = WordSet.from_file(app.config['DICTIONARY_PATH'])
    except FileNotFoundError as exc:
        raise click.UsageError(f"{exc} (use --dictionary or DICTIONARY_PATH)")

    score = play(app, command_rx, dictionary)
    click.echo(f"Final score: {score}")


if __name__ == '__main__':
    main()
