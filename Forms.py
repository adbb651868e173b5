from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, SelectField
from wtforms.validators import DataRequired, Length, NumberRange, Optional

from config import DeckConfig


class SessionStartForm(FlaskForm):

    session_id = StringField("Session ID", validators=[DataRequired(), Length(min=1, max=128)])


class AddDeckForm(FlaskForm):

    deck_name = StringField("Deck", validators=[DataRequired(), Length(max=128)])
    discard_visibility = SelectField('Discard Pile', choices=[
        (DeckConfig.DISCARD_VISIBLE, 'Visible'),
        (DeckConfig.DISCARD_TOP_N, 'Top cards only'),
        (DeckConfig.DISCARD_HIDDEN, 'Hidden'),
    ], default=DeckConfig.DISCARD_VISIBLE, validators=[Optional()])
    discard_visible_count = IntegerField(
        "Visible discards",
        default=DeckConfig.DEFAULT_DISCARD_VISIBLE_COUNT,
        validators=[Optional(), NumberRange(min=1)]
    )


class DrawForm(FlaskForm):

    count = IntegerField(
        "Count",
        default=DeckConfig.DEFAULT_DRAW_COUNT,
        validators=[Optional(), NumberRange(min=0, max=DeckConfig.MAX_DRAW_COUNT)]
    )


class MoveCardForm(FlaskForm):

    source_deck_id = StringField(validators=[DataRequired()])
    target_deck_id = StringField(validators=[DataRequired()])
    card_id = StringField(validators=[Optional()])


class MergeDecksForm(FlaskForm):

    deck_id_one = StringField(validators=[DataRequired()])
    deck_id_two = StringField(validators=[DataRequired()])
