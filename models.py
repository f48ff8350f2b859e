from extensions import db
from datetime import datetime
from sqlalchemy import JSON


# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


class Work(db.Model):
    __tablename__ = 'works'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    descriptions = db.Column(SafeJSON, default=list)  # ["Built APIs", ...]
    technologies = db.Column(SafeJSON, default=list)
    image_name = db.Column(db.String(500), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'company': self.company,
            'start_date': self.start_date,
            'end_date': self.end_date,
            'descriptions': list(self.descriptions or []),
            'technologies': list(self.technologies or []),
            'image_name': self.image_name,
        }


class Project(db.Model):
    __tablename__ = 'projects'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    technologies = db.Column(SafeJSON, default=list)
    github_link = db.Column(db.String(500))
    live_demo_link = db.Column(db.String(500))
    image_name = db.Column(db.String(500), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'technologies': list(self.technologies or []),
            'github_link': self.github_link,
            'live_demo_link': self.live_demo_link,
            'image_name': self.image_name,
        }


class Admin(db.Model):
    __tablename__ = 'admin'
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    session_token = db.Column(db.String(64))  # cleared on logout to revoke issued cookies
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
