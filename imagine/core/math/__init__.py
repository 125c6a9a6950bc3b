"""
Core math modules для imagine

Скалярные примитивы с epsilon-толерантностью, арифметика комплексных чисел,
полярная форма, exp/log и тригонометрия.

Модули импортируются по полному пути (imagine.core.math.<module>):
арифметика ссылается на тип Complex, а тип Complex делегирует свои
операторы арифметике.
"""
