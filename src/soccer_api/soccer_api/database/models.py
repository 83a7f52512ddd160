"""ORM tables (one table per entity, simple foreign keys)."""

from .extension import db


class League(db.Model):
    __tablename__ = "leagues"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(120), nullable=False)
    country = db.Column(db.String(80), nullable=False)
    season = db.Column(db.String(20), nullable=False)


class Team(db.Model):
    __tablename__ = "teams"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(120), nullable=False)
    founded = db.Column(db.Date)
    venue = db.Column(db.String(120))
    city = db.Column(db.String(80))
    country = db.Column(db.String(80))


class Player(db.Model):
    __tablename__ = "players"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    firstname = db.Column(db.String(80), nullable=False)
    lastname = db.Column(db.String(80), nullable=False)
    birthdate = db.Column(db.Date)
    country = db.Column(db.String(80))
    position = db.Column(db.String(40))
    numero = db.Column(db.Integer, nullable=False)
    team_id = db.Column(db.Integer, db.ForeignKey("teams.id"))


class Match(db.Model):
    __tablename__ = "matches"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    played = db.Column(db.Date, nullable=False)
    venue = db.Column(db.String(120), nullable=False)
    score = db.Column(db.String(20), nullable=False)
    outcome = db.Column(db.Integer, nullable=False)
    league_id = db.Column(db.Integer, db.ForeignKey("leagues.id"), nullable=False)
    host = db.Column(db.Integer, db.ForeignKey("teams.id"), nullable=False)
    guest = db.Column(db.Integer, db.ForeignKey("teams.id"), nullable=False)


class Stat(db.Model):
    __tablename__ = "stats"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    goals = db.Column(db.Integer, nullable=False, default=0)
    assists = db.Column(db.Integer, nullable=False, default=0)
    saves = db.Column(db.Integer, nullable=False, default=0)
    yellow = db.Column(db.Integer, nullable=False, default=0)
    red = db.Column(db.Integer, nullable=False, default=0)
    minutes = db.Column(db.Integer, nullable=False, default=0)
    match_id = db.Column(db.Integer, db.ForeignKey("matches.id"), nullable=False)
    player_id = db.Column(db.Integer, db.ForeignKey("players.id"), nullable=False)


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    username = db.Column(db.String(50), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
