from gaztag.gaz_dictionary import Gazetteer


def make_rows(tokens, pos_tags=None, joined=()):
    """
    Build token rows with character offsets.

    Tokens are separated by one space unless their index is in ``joined``, in
    which case the token directly follows the previous one.
    """
    rows = []
    offset = 0
    for i, token in enumerate(tokens):
        if i > 0 and i not in joined:
            offset += 1
        pos = pos_tags[i] if pos_tags else "NN"
        rows.append([str(offset), str(offset + len(token)), token, "-", pos])
        offset += len(token)
    return rows


def make_gazetteer(entries, normalize_type=0, classes=()):
    gazetteer = Gazetteer(normalize_type)
    for name in classes:
        gazetteer.class_id(name)
    for surface, class_names in entries:
        gazetteer.add(surface, class_names)
    return gazetteer


def label_column(rows, col=5):
    return [row[col] for row in rows]
