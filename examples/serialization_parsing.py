# -*- encoding: utf-8 -*-
# @File   : serialization_parsing.py
# @Time   : 2026/10/18 16:35:02
# @Author : Kariko Lin

import logging

from pylibini import Ini, IniError

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')


def serialization():
    ini = Ini()
    ini.set('', 'GlobalKey', 1)

    ini.set('Person.Attributes', 'Name', 'John')
    ini.set('Person.Attributes', 'Age', 32)

    ini.set('Person.RandomStats', 'RandomNum', 654.956)

    try:
        ini.serialize('my_file.ini')
    except IniError as e:
        logging.error(f'failed serializing: {e}')


def parsing():
    ini = Ini()
    try:
        ini.parse('my_file.ini')
    except IniError as e:
        logging.error(f'failed parsing: {e}')
        return

    print(ini.get_int('', 'GlobalKey'))
    print(ini.get_str('Person.Attributes', 'Name'))

    if (some_key := ini.get_opt('MySection', 'SomeKey')) is None:
        print("some_key doesn't exist!")
    else:
        print(some_key)


if __name__ == '__main__':
    serialization()
    parsing()
