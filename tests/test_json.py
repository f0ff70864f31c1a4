import gelfpub


def test_encode_and_decode():

    input_dictionary = dict()
    input_dictionary['list'] = [1, 2, 3, 'a', 'b', None, 'c', 'z']
    input_dictionary['dict'] = {'one': 1, 'two': 2}
    input_dictionary['none'] = None
    input_dictionary['true'] = True
    input_dictionary['false'] = False
    input_dictionary['float'] = 1712345678.125

    encoded = gelfpub.json.dumps(input_dictionary)
    assert isinstance(encoded, bytes)

    decoded = gelfpub.json.loads(encoded)
    assert decoded == input_dictionary


def test_key_order():

    # GELF collectors don't care about key order, but the encoding of a
    # given message should be stable: keys come out in insertion order.

    ordered = dict()
    ordered['version'] = '1.0'
    ordered['host'] = 'example'
    ordered['short_message'] = 'hello'
    ordered['_zulu'] = 1
    ordered['_alpha'] = 2

    encoded = gelfpub.json.dumps(ordered)
    decoded = gelfpub.json.loads(encoded)

    assert list(decoded.keys()) == list(ordered.keys())
    assert encoded.index(b'"_zulu"') < encoded.index(b'"_alpha"')


def test_utf8():

    encoded = gelfpub.json.dumps({'short_message': 'café'})
    assert gelfpub.json.loads(encoded)['short_message'] == 'café'

    # No ASCII escaping; the text goes out as UTF-8.
    assert 'café'.encode('utf-8') in encoded


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
