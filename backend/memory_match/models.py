from datetime import datetime

from memory_match import db


class ScoreRecord(db.Model):
    __tablename__ = 'score_record'
    id = db.Column(db.Integer, primary_key=True)
    player_name = db.Column(db.String(64), nullable=False, index=True)
    score = db.Column(db.Integer, nullable=False, default=0)
    attempts = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    @classmethod
    def ranked(cls):
        """Best score first; fewer attempts, then earlier, break ties."""
        return cls.query.order_by(cls.score.desc(), cls.attempts.asc(), cls.created_at.asc(), cls.id.asc())

    def to_dict(self):
        return {
            'playerName': self.player_name,
            'score': self.score,
            'attempts': self.attempts,
            'date': self.created_at.date().isoformat() if self.created_at else None,
        }
