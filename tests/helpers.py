from unittest import mock

from libleader import LibLeader


def make_cord(**options):
    options.setdefault('username', 'leader')
    cord = LibLeader(**options)
    cord.session = mock.MagicMock()
    return cord


def sent(cord):
    """(channel, text) pairs posted by the fake session"""
    return [
        (call.kwargs['json'].get('channel'), call.kwargs['json'].get('text'))
        for call in cord.session.post.call_args_list
    ]
