from linkedstructs.single_list import SingleList
from linkedstructs.student import Student


def test_defaults():
    student = Student()
    assert student.name == ""
    assert student.age == 0
    assert student.group == ""


def test_fields():
    student = Student("Марія", 19, "КН-141")
    assert student.name == "Марія"
    assert student.age == 19
    assert student.group == "КН-141"


def test_str_format():
    student = Student("Андрій", 18, "ІПЗ-143")
    assert str(student) == "[Name: Андрій, Age: 18, Group: ІПЗ-143]"


def test_equality_requires_all_fields():
    base = Student("Олена", 17, "ІПЗ-143")
    assert base == Student("Олена", 17, "ІПЗ-143")
    assert not base == Student("Олена", 18, "ІПЗ-143")
    assert not base == Student("Олена", 17, "КН-141")
    assert not base == Student("Марія", 17, "ІПЗ-143")


def test_membership_in_list_uses_equality():
    lst = SingleList([Student("Андрій", 18, "ІПЗ-143")])
    assert Student("Андрій", 18, "ІПЗ-143") in lst
    assert Student("Андрій", 19, "ІПЗ-143") not in lst