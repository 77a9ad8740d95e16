from flask import Blueprint, jsonify

from memory_match.services.games.deck import default_cards

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the Memory Match game server!'})

@main.route('/api/cards')
def get_default_cards():
    """The built-in card set, in deal order before shuffling."""
    return jsonify([c.to_dict() for c in default_cards()])
