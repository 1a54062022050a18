import logging
import threading

from werkzeug.serving import make_server

from letterbank.channel import CommandReceiver
from letterbank.services.game import GameLoop, GameState, WordSet, build_pool
from letterbank.terminal import run_terminal


def configure_logging(app_config) -> None:
    """Send all logging to LOG_FILE; curses owns stdout/stderr."""
    logging.basicConfig(
        filename=app_config['LOG_FILE'],
        level=app_config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def start_listener(app):
    """Serve the command listener from a daemon thread, one thread per request.

    There is no drain on shutdown: the thread dies with the process.
    """
    host = app.config['LISTEN_HOST']
    port = int(app.config['LISTEN_PORT'])
    server = make_server(host, port, app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, name='command-listener', daemon=True)
    thread.start()
    app.logger.info(f"[listener-start] host={host} port={port}")
    return server, thread


def build_game(app_config, receiver: CommandReceiver, dictionary=None) -> GameLoop:
    if dictionary is None:
        dictionary = WordSet.from_file(app_config['DICTIONARY_PATH'])
    state = GameState(
        dictionary,
        pool=build_pool(scored=bool(app_config['SCORED_LETTERS'])),
        bank_size=int(app_config['BANK_SIZE']),
        word_maxlen=int(app_config['WORD_MAXLEN']),
        min_word_length=int(app_config['MIN_WORD_LENGTH']),
    )
    return GameLoop(state, receiver)


def play(app, receiver: CommandReceiver, dictionary=None) -> int:
    """Run the game until the player quits and return the final score."""
    loop = build_game(app.config, receiver, dictionary)
    start_listener(app)
    try:
        run_terminal(loop, tick_ms=int(app.config['TICK_MS']), port=int(app.config['LISTEN_PORT']))
    finally:
        receiver.close()
        app.logger.info(f"[game-over] score={loop.state.score}")
    return loop.state.score
