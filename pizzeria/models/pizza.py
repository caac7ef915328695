"""
Pizza Model
"""

from pizzeria.extensions import db


class Pizza(db.Model):
    """Catalog item shown on the public menu"""
    __tablename__ = 'pizzas'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    image = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'price': float(self.price) if self.price is not None else None,
            'image': self.image,
        }

    def __repr__(self):
        return f'<Pizza {self.name}>'
