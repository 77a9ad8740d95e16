from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Leaderboard gateway used by the game routes
    from memory_match.services.leaderboard import build_leaderboard
    flask_app.extensions['leaderboard'] = build_leaderboard(flask_app)

    # Import and register blueprints here
    from memory_match.main import main
    flask_app.register_blueprint(main)

    from memory_match.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    from memory_match.api.leaderboard import leaderboard
    flask_app.register_blueprint(leaderboard, url_prefix='/api/leaderboard')

    # Register Socket.IO event handlers
    try:
        from memory_match.socketio_events import register_socketio_handlers
        register_socketio_handlers(testing=flask_app.config.get('TESTING', False))
    except Exception as exc:
        flask_app.logger.warning(f"SocketIO events not loaded: {exc}")

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from memory_match.models import ScoreRecord
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            # Seed a few scores so the leaderboard is not empty
            seeds = [('testuser1', 100, 8), ('testuser2', 80, 10), ('testuser3', 57, 14)]
            for name, score, attempts in seeds:
                db.session.add(ScoreRecord(player_name=name, score=score, attempts=attempts))

            db.session.commit()
            print('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
