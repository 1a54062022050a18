from flask import Flask
from config import Config
from letterbank.channel import Command, open_command_channel


def create_app(config_class=Config, command_sender=None):
    """Build the viewer command listener.

    The game loop keeps the receiving half of the channel; only the sender
    is handed to the app. Without one, a private channel is opened so the
    listener can be served on its own.
    """
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    # Keep "//replace//a" from being redirected before it reaches the parser
    flask_app.url_map.merge_slashes = False

    if command_sender is None:
        command_sender, receiver = open_command_channel()
        receiver.close()
        flask_app.logger.warning("No command channel given; viewer commands will go nowhere")
    flask_app.extensions['command_sender'] = command_sender

    from letterbank.api.commands import commands
    flask_app.register_blueprint(commands)

    return flask_app
