"""Static sanctoral table: saints and feasts of the universal calendar.

Keyed by ``(month, day)``; a date may carry several commemorations, the
first being the primary one.  Entry types, in descending precedence:
``feast`` (solemnities and feasts), ``memorial``, ``optional``, ``saint``
and ``none`` (a plain liturgical day with no specific saint).
"""

from dataclasses import dataclass
from types import MappingProxyType

ENTRY_TYPES = ("feast", "memorial", "optional", "saint", "none")


@dataclass(frozen=True)
class SaintEntry:
    name: str
    type: str
    description: str

    def to_dict(self):
        return {"name": self.name, "type": self.type, "description": self.description}


_TABLE = {
    # January
    (1, 1): [("Mary, Mother of God", "feast", "Solemnity of Mary, the Holy Mother of God")],
    (1, 2): [("Saints Basil the Great and Gregory Nazianzen", "memorial", "Bishops and Doctors of the Church")],
    (1, 3): [("The Most Holy Name of Jesus", "optional", "Optional Memorial")],
    (1, 6): [("Epiphany of the Lord", "feast", "The manifestation of Christ to the Magi")],
    (1, 7): [("Saint Raymond of Penyafort", "optional", "Priest")],
    (1, 13): [("Saint Hilary", "optional", "Bishop and Doctor of the Church")],
    (1, 17): [("Saint Anthony", "memorial", "Abbot")],
    (1, 20): [
        ("Saint Fabian", "optional", "Pope and Martyr"),
        ("Saint Sebastian", "optional", "Martyr"),
    ],
    (1, 21): [("Saint Agnes", "memorial", "Virgin and Martyr")],
    (1, 22): [("Saint Vincent", "optional", "Deacon and Martyr")],
    (1, 24): [("Saint Francis de Sales", "memorial", "Bishop and Doctor of the Church")],
    (1, 25): [("The Conversion of Saint Paul the Apostle", "feast", "Apostle")],
    (1, 26): [("Saints Timothy and Titus", "memorial", "Bishops")],
    (1, 27): [("Saint Angela Merici", "optional", "Virgin")],
    (1, 28): [("Saint Thomas Aquinas", "memorial", "Priest and Doctor of the Church")],
    (1, 31): [("Saint John Bosco", "memorial", "Priest")],
    # February
    (2, 2): [("The Presentation of the Lord", "feast", "Candlemas")],
    (2, 3): [("Saint Blaise", "optional", "Bishop and Martyr")],
    (2, 5): [("Saint Agatha", "memorial", "Virgin and Martyr")],
    (2, 6): [("Saint Paul Miki and Companions", "memorial", "Martyrs")],
    (2, 8): [("Saint Jerome Emiliani", "optional", "Priest")],
    (2, 10): [("Saint Scholastica", "memorial", "Virgin")],
    (2, 11): [("Our Lady of Lourdes", "optional", "Optional Memorial")],
    (2, 14): [("Saints Cyril and Methodius", "memorial", "Bishops")],
    (2, 17): [("The Seven Founders of the Servite Order", "optional", "Religious")],
    (2, 21): [("Saint Peter Damian", "optional", "Bishop and Doctor of the Church")],
    (2, 22): [("The Chair of Saint Peter the Apostle", "feast", "Apostle")],
    (2, 23): [("Saint Polycarp", "memorial", "Bishop and Martyr")],
    # March
    (3, 4): [("Saint Casimir", "optional", "Confessor")],
    (3, 7): [("Saints Perpetua and Felicity", "memorial", "Martyrs")],
    (3, 8): [("Saint John of God", "optional", "Religious")],
    (3, 9): [("Saint Frances of Rome", "optional", "Religious")],
    (3, 17): [("Saint Patrick", "memorial", "Bishop")],
    (3, 18): [("Saint Cyril of Jerusalem", "optional", "Bishop and Doctor of the Church")],
    (3, 19): [("Saint Joseph, Spouse of the Blessed Virgin Mary", "feast", "Patron of the Universal Church")],
    (3, 23): [("Saint Turibius of Mogrovejo", "optional", "Bishop")],
    (3, 25): [("The Annunciation of the Lord", "feast", "The Angel Gabriel announces to Mary")],
    # April
    (4, 2): [("Saint Francis of Paola", "optional", "Hermit")],
    (4, 4): [("Saint Isidore", "optional", "Bishop and Doctor of the Church")],
    (4, 5): [("Saint Vincent Ferrer", "optional", "Priest")],
    (4, 7): [("Saint John Baptist de la Salle", "memorial", "Priest")],
    (4, 11): [("Saint Stanislaus", "memorial", "Bishop and Martyr")],
    (4, 13): [("Saint Martin I", "optional", "Pope and Martyr")],
    (4, 21): [("Saint Anselm", "optional", "Bishop and Doctor of the Church")],
    (4, 23): [
        ("Saint George", "optional", "Martyr"),
        ("Saint Adalbert", "optional", "Bishop and Martyr"),
    ],
    (4, 24): [("Saint Fidelis of Sigmaringen", "optional", "Priest and Martyr")],
    (4, 25): [("Saint Mark", "feast", "Evangelist")],
    (4, 28): [("Saint Peter Chanel", "optional", "Priest and Martyr")],
    (4, 29): [("Saint Catherine of Siena", "memorial", "Virgin and Doctor of the Church")],
    (4, 30): [("Saint Pius V", "optional", "Pope")],
    # May
    (5, 1): [("Saint Joseph the Worker", "optional", "Patron of Workers")],
    (5, 2): [("Saint Athanasius", "memorial", "Bishop and Doctor of the Church")],
    (5, 3): [("Saints Philip and James", "feast", "Apostles")],
    (5, 10): [("Saint John of Avila", "optional", "Priest and Doctor of the Church")],
    (5, 12): [
        ("Saints Nereus and Achilleus", "optional", "Martyrs"),
        ("Saint Pancras", "optional", "Martyr"),
    ],
    (5, 13): [("Our Lady of Fatima", "optional", "Optional Memorial")],
    (5, 14): [("Saint Matthias", "feast", "Apostle")],
    (5, 18): [("Saint John I", "optional", "Pope and Martyr")],
    (5, 20): [("Saint Bernardine of Siena", "optional", "Priest")],
    (5, 21): [("Saint Christopher Magallanes and Companions", "optional", "Martyrs")],
    (5, 22): [("Saint Rita of Cascia", "optional", "Religious")],
    (5, 25): [("Saint Bede the Venerable", "optional", "Priest and Doctor of the Church")],
    (5, 26): [("Saint Philip Neri", "memorial", "Priest")],
    (5, 27): [("Saint Augustine of Canterbury", "optional", "Bishop")],
    (5, 31): [("The Visitation of the Blessed Virgin Mary", "feast", "Mary visits Elizabeth")],
    # June
    (6, 1): [("Saint Justin", "memorial", "Martyr")],
    (6, 2): [("Saints Marcellinus and Peter", "optional", "Martyrs")],
    (6, 3): [("Saints Charles Lwanga and Companions", "memorial", "Martyrs")],
    (6, 5): [("Saint Boniface", "memorial", "Bishop and Martyr")],
    (6, 6): [("Saint Norbert", "optional", "Bishop")],
    (6, 9): [("Saint Ephrem", "optional", "Deacon and Doctor of the Church")],
    (6, 11): [("Saint Barnabas", "memorial", "Apostle")],
    (6, 13): [("Saint Anthony of Padua", "memorial", "Priest and Doctor of the Church")],
    (6, 19): [("Saint Romuald", "optional", "Abbot")],
    (6, 21): [("Saint Aloysius Gonzaga", "memorial", "Religious")],
    (6, 22): [("Saints John Fisher and Thomas More", "optional", "Martyrs")],
    (6, 24): [("The Nativity of Saint John the Baptist", "feast", "Forerunner of Christ")],
    (6, 27): [("Saint Cyril of Alexandria", "optional", "Bishop and Doctor of the Church")],
    (6, 28): [("Saint Irenaeus", "memorial", "Bishop and Martyr")],
    (6, 29): [("Saints Peter and Paul", "feast", "Apostles")],
    (6, 30): [("The First Martyrs of the Church of Rome", "optional", "Martyrs")],
    # July
    (7, 3): [("Saint Thomas", "feast", "Apostle")],
    (7, 4): [("Saint Elizabeth of Portugal", "optional", "Queen")],
    (7, 5): [("Saint Anthony Zaccaria", "optional", "Priest")],
    (7, 6): [("Saint Maria Goretti", "optional", "Virgin and Martyr")],
    (7, 11): [("Saint Benedict", "memorial", "Abbot, Patron of Europe")],
    (7, 13): [("Saint Henry", "optional", "Emperor")],
    (7, 14): [("Saint Kateri Tekakwitha", "optional", "Virgin")],
    (7, 15): [("Saint Bonaventure", "memorial", "Bishop and Doctor of the Church")],
    (7, 16): [("Our Lady of Mount Carmel", "optional", "Optional Memorial")],
    (7, 20): [("Saint Apollinaris", "optional", "Bishop and Martyr")],
    (7, 21): [("Saint Lawrence of Brindisi", "optional", "Priest and Doctor of the Church")],
    (7, 22): [("Saint Mary Magdalene", "feast", "Apostle to the Apostles")],
    (7, 23): [("Saint Bridget", "optional", "Religious")],
    (7, 24): [("Saint Sharbel Makhluf", "optional", "Priest")],
    (7, 25): [("Saint James", "feast", "Apostle")],
    (7, 26): [("Saints Joachim and Anne", "memorial", "Parents of the Blessed Virgin Mary")],
    (7, 29): [("Saints Martha, Mary, and Lazarus", "memorial", "Friends of Jesus")],
    (7, 30): [("Saint Peter Chrysologus", "optional", "Bishop and Doctor of the Church")],
    (7, 31): [("Saint Ignatius of Loyola", "memorial", "Priest")],
    # August
    (8, 1): [("Saint Alphonsus Liguori", "memorial", "Bishop and Doctor of the Church")],
    (8, 2): [
        ("Saint Eusebius of Vercelli", "optional", "Bishop"),
        ("Saint Peter Julian Eymard", "optional", "Priest"),
    ],
    (8, 4): [("Saint John Vianney", "memorial", "Priest, Patron of Parish Priests")],
    (8, 5): [("The Dedication of the Basilica of Saint Mary Major", "optional", "Optional Memorial")],
    (8, 6): [("The Transfiguration of the Lord", "feast", "Jesus is transfigured on Mount Tabor")],
    (8, 7): [("Saint Sixtus II", "optional", "Pope and Martyr")],
    (8, 8): [("Saint Dominic", "memorial", "Priest")],
    (8, 9): [("Saint Teresa Benedicta of the Cross", "optional", "Virgin and Martyr")],
    (8, 10): [("Saint Lawrence", "feast", "Deacon and Martyr")],
    (8, 11): [("Saint Clare", "memorial", "Virgin")],
    (8, 13): [("Saints Pontian and Hippolytus", "optional", "Martyrs")],
    (8, 14): [("Saint Maximilian Kolbe", "memorial", "Priest and Martyr")],
    (8, 15): [("The Assumption of the Blessed Virgin Mary", "feast", "Mary is taken body and soul into heaven")],
    (8, 16): [("Saint Stephen of Hungary", "optional", "King")],
    (8, 19): [("Saint John Eudes", "optional", "Priest")],
    (8, 20): [("Saint Bernard", "memorial", "Abbot and Doctor of the Church")],
    (8, 21): [("Saint Pius X", "memorial", "Pope")],
    (8, 22): [("The Queenship of the Blessed Virgin Mary", "memorial", "Optional Memorial")],
    (8, 23): [("Saint Rose of Lima", "optional", "Virgin")],
    (8, 24): [("Saint Bartholomew", "feast", "Apostle")],
    (8, 25): [("Saint Louis", "optional", "King")],
    (8, 27): [("Saint Monica", "memorial", "Mother of Saint Augustine")],
    (8, 28): [("Saint Augustine", "memorial", "Bishop and Doctor of the Church")],
    (8, 29): [("The Passion of Saint John the Baptist", "memorial", "Martyr")],
    # September
    (9, 3): [("Saint Gregory the Great", "memorial", "Pope and Doctor of the Church")],
    (9, 8): [("The Nativity of the Blessed Virgin Mary", "feast", "Birth of Mary")],
    (9, 9): [("Saint Peter Claver", "optional", "Priest")],
    (9, 12): [("The Most Holy Name of Mary", "optional", "Optional Memorial")],
    (9, 13): [("Saint John Chrysostom", "memorial", "Bishop and Doctor of the Church")],
    (9, 14): [("The Exaltation of the Holy Cross", "feast", "Triumph of the Cross")],
    (9, 15): [("Our Lady of Sorrows", "memorial", "Optional Memorial")],
    (9, 16): [("Saints Cornelius and Cyprian", "optional", "Martyrs")],
    (9, 17): [("Saint Robert Bellarmine", "optional", "Bishop and Doctor of the Church")],
    (9, 19): [("Saint Januarius", "optional", "Bishop and Martyr")],
    (9, 20): [("Saints Andrew Kim Taegon, Paul Chong Hasang, and Companions", "memorial", "Martyrs")],
    (9, 21): [("Saint Matthew", "feast", "Apostle and Evangelist")],
    (9, 23): [("Saint Pius of Pietrelcina", "memorial", "Priest")],
    (9, 26): [("Saints Cosmas and Damian", "optional", "Martyrs")],
    (9, 27): [("Saint Vincent de Paul", "memorial", "Priest")],
    (9, 28): [
        ("Saint Wenceslaus", "optional", "Martyr"),
        ("Saint Lawrence Ruiz and Companions", "optional", "Martyrs"),
    ],
    (9, 29): [("Saints Michael, Gabriel, and Raphael", "feast", "Archangels")],
    (9, 30): [("Saint Jerome", "memorial", "Priest and Doctor of the Church")],
    # October
    (10, 1): [("Saint Thérèse of the Child Jesus", "memorial", "Virgin and Doctor of the Church")],
    (10, 2): [("The Holy Guardian Angels", "memorial", "Optional Memorial")],
    (10, 4): [("Saint Francis of Assisi", "memorial", "Founder of the Franciscans")],
    (10, 5): [("Saint Faustina Kowalska", "optional", "Virgin")],
    (10, 6): [("Saint Bruno", "optional", "Priest")],
    (10, 7): [("Our Lady of the Rosary", "memorial", "Optional Memorial")],
    (10, 9): [
        ("Saint Denis and Companions", "optional", "Martyrs"),
        ("Saint John Leonardi", "optional", "Priest"),
    ],
    (10, 11): [("Saint John XXIII", "optional", "Pope")],
    (10, 14): [("Saint Callistus I", "optional", "Pope and Martyr")],
    (10, 15): [("Saint Teresa of Jesus", "memorial", "Virgin and Doctor of the Church")],
    (10, 16): [("Saint Hedwig", "optional", "Religious")],
    (10, 17): [("Saint Ignatius of Antioch", "memorial", "Bishop and Martyr")],
    (10, 18): [("Saint Luke", "feast", "Evangelist")],
    (10, 19): [("Saints John de Brébeuf and Isaac Jogues", "optional", "Priests and Martyrs")],
    (10, 22): [("Saint John Paul II", "optional", "Pope")],
    (10, 23): [("Saint John of Capistrano", "optional", "Priest")],
    (10, 24): [("Saint Anthony Mary Claret", "optional", "Bishop")],
    (10, 28): [("Saints Simon and Jude", "feast", "Apostles")],
    # November
    (11, 1): [("All Saints", "feast", "Solemnity of All Saints")],
    (11, 2): [("All Souls", "feast", "The Commemoration of All the Faithful Departed")],
    (11, 3): [("Saint Martin de Porres", "optional", "Religious")],
    (11, 4): [("Saint Charles Borromeo", "memorial", "Bishop")],
    (11, 9): [("The Dedication of the Lateran Basilica", "feast", "Mother and Head of all Churches")],
    (11, 10): [("Saint Leo the Great", "memorial", "Pope and Doctor of the Church")],
    (11, 11): [("Saint Martin of Tours", "memorial", "Bishop")],
    (11, 12): [("Saint Josaphat", "memorial", "Bishop and Martyr")],
    (11, 13): [("Saint Frances Xavier Cabrini", "optional", "Virgin")],
    (11, 15): [("Saint Albert the Great", "optional", "Bishop and Doctor of the Church")],
    (11, 16): [
        ("Saint Margaret of Scotland", "optional", "Queen"),
        ("Saint Gertrude", "optional", "Virgin"),
    ],
    (11, 17): [("Saint Elizabeth of Hungary", "memorial", "Religious")],
    (11, 18): [("The Dedication of the Basilicas of Saints Peter and Paul", "optional", "Optional Memorial")],
    (11, 21): [("The Presentation of the Blessed Virgin Mary", "memorial", "Optional Memorial")],
    (11, 22): [("Saint Cecilia", "memorial", "Virgin and Martyr")],
    (11, 23): [("Saint Clement I", "optional", "Pope and Martyr")],
    (11, 24): [("Saints Andrew Dung-Lac and Companions", "memorial", "Martyrs")],
    (11, 25): [("Saint Catherine of Alexandria", "optional", "Virgin and Martyr")],
    (11, 30): [("Saint Andrew", "feast", "Apostle")],
    # December
    (12, 3): [("Saint Francis Xavier", "memorial", "Priest")],
    (12, 4): [("Saint John Damascene", "optional", "Priest and Doctor of the Church")],
    (12, 6): [("Saint Nicholas", "optional", "Bishop")],
    (12, 7): [("Saint Ambrose", "memorial", "Bishop and Doctor of the Church")],
    (12, 8): [("The Immaculate Conception of the Blessed Virgin Mary", "feast", "Patroness of the United States")],
    (12, 9): [("Saint Juan Diego", "optional", "Confessor")],
    (12, 10): [("Our Lady of Loreto", "optional", "Optional Memorial")],
    (12, 11): [("Saint Damasus I", "optional", "Pope")],
    (12, 12): [("Our Lady of Guadalupe", "feast", "Patroness of the Americas")],
    (12, 13): [("Saint Lucy", "memorial", "Virgin and Martyr")],
    (12, 14): [("Saint John of the Cross", "memorial", "Priest and Doctor of the Church")],
    (12, 21): [("Saint Peter Canisius", "optional", "Priest and Doctor of the Church")],
    (12, 23): [("Saint John of Kanty", "optional", "Priest")],
    (12, 26): [("Saint Stephen", "feast", "The First Martyr")],
    (12, 27): [("Saint John", "feast", "Apostle and Evangelist")],
    (12, 28): [("The Holy Innocents", "feast", "Martyrs")],
    (12, 29): [("Saint Thomas Becket", "optional", "Bishop and Martyr")],
    (12, 31): [("Saint Sylvester I", "optional", "Pope")],
}


def _freeze(table):
    months = {}
    for (month, day), entries in table.items():
        months.setdefault(month, {})[day] = tuple(SaintEntry(*entry) for entry in entries)
    return MappingProxyType({month: MappingProxyType(days) for month, days in months.items()})


SAINT_CALENDAR = _freeze(_TABLE)
del _TABLE


def lookup(month, day):
    """Return the table entries for ``(month, day)``; empty when there are none."""
    return SAINT_CALENDAR.get(month, {}).get(day, ())
